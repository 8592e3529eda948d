from dataclasses import dataclass

@dataclass
class Health:
    current: int
    max_hp: int
