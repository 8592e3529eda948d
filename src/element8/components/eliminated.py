from dataclasses import dataclass


@dataclass(slots=True)
class Eliminated:
    """Tag added once when a player's health drops to zero or below; never removed."""
    source_owner: int | None = None
