from dataclasses import dataclass


@dataclass(slots=True)
class BlockToken:
    """The stone card: may absorb all damage of one winning attack, then is consumed."""
    pass
