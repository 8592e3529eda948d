from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Emblems:
    names: List[str] = field(default_factory=list)
