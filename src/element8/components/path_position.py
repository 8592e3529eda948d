from dataclasses import dataclass


@dataclass(slots=True)
class PathPosition:
    """Location of a player on the perimeter path.

    ``path_index`` is canonical; ``row`` and ``col`` mirror the coordinate at
    that index and are refreshed whenever the index changes.
    """
    path_index: int
    row: int
    col: int

    @property
    def coordinate(self) -> tuple[int, int]:
        return (self.row, self.col)
