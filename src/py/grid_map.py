"""Immutable grid of open/blocked cells and the cell classifier."""

from typing import Container, Iterator, Sequence, Tuple, Union

from data_types import Blocked, Empty, Position, Visited
from map_loader import normalize_grid

OPEN_CHAR = "."

CellStatus = Union[Empty, Visited, Blocked]


class GridMap:
    """Read-only wrapper over a rectangular character grid.

    A cell is open iff it lies inside the grid and holds ``open_char``.
    Out-of-bounds and wall cells are both reported as not open.
    """

    def __init__(self, rows: Sequence[str], open_char: str = OPEN_CHAR):
        rows = normalize_grid(rows)
        if not rows or not rows[0]:
            raise ValueError("Grid must have at least one row and one column")
        self._rows: Tuple[str, ...] = tuple(rows)
        self.open_char = open_char
        self.width = len(rows[0])
        self.height = len(rows)

    @property
    def rows(self) -> Tuple[str, ...]:
        return self._rows

    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def open_at(self, pos: Position) -> bool:
        if not self.in_bounds(pos):
            return False
        x, y = pos
        return self._rows[y][x] == self.open_char

    def open_cells(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                if self._rows[y][x] == self.open_char:
                    yield (x, y)

    def __repr__(self) -> str:
        return f"GridMap({self.width}x{self.height})"


def classify(grid_map: GridMap, pos: Position, visited: Container[Position]) -> CellStatus:
    if not grid_map.open_at(pos):
        return Blocked()
    if pos in visited:
        return Visited(pos)
    return Empty(pos)
