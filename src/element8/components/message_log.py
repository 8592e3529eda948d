from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class MessageLog:
    """Current status message (one entry per line) plus every line of the session."""
    lines: List[str] = field(default_factory=list)
    history: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def replace(self, text: str) -> None:
        self.lines = [text]
        self.history.append(text)

    def append(self, text: str) -> None:
        self.lines.append(text)
        self.history.append(text)
