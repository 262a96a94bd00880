import bisect
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List, Optional, Set, Tuple

from .directions import ALL_DIRECTIONS, Direction

XY = Tuple[int, int]
EdgeKey = FrozenSet[XY]


class InvalidDimensionError(ValueError):
    """Grid width/height must be positive integers."""


def edge_key(x: int, y: int, direction: Direction) -> EdgeKey:
    # One key per shared edge: both sides of a wall map to the same frozenset.
    # Border edges pair the cell with its off-grid coordinate.
    dx, dy = direction.delta
    return frozenset(((x, y), (x + dx, y + dy)))


@dataclass(eq=False)
class Cell:
    """
    One grid position. Plain record: generation flags plus a non-owning
    reference to the grid, which holds the actual wall state per edge.
    """
    grid: "Grid" = field(repr=False)
    x: int
    y: int
    open: bool = False
    start: bool = False
    exit: bool = False

    @property
    def xy(self) -> XY:
        return (self.x, self.y)

    @property
    def walls(self) -> Dict[Direction, bool]:
        return {d: self.has_wall(d) for d in ALL_DIRECTIONS}

    def has_wall(self, direction: Direction) -> bool:
        return self.grid.has_wall(self.x, self.y, direction)

    def set_wall(self, direction: Direction, present: bool) -> None:
        self.grid.set_wall(self.x, self.y, direction, present)

    def neighbor(self, direction: Direction) -> Optional["Cell"]:
        dx, dy = direction.delta
        return self.grid.cell_at(self.x + dx, self.y + dy)

    def open_directions(self) -> List[Direction]:
        """Directions with a standing wall that is not on the outer border."""
        return [
            d for d in ALL_DIRECTIONS
            if self.has_wall(d) and self.neighbor(d) is not None
        ]

    def wall_code(self) -> int:
        code = 0
        for d in ALL_DIRECTIONS:
            if self.has_wall(d):
                code |= d.bit
        return code

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"


class Grid:
    """
    Fixed-size width×height maze grid.

    Walls live in a single edge store (``_passages``): an edge whose key is
    in the set has no wall. Every cell starts fully walled.
    """

    def __init__(self, width: int, height: int):
        for name, v in (("width", width), ("height", height)):
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidDimensionError(f"{name} must be an int, got {v!r}")
            if v <= 0:
                raise InvalidDimensionError(f"{name} must be > 0, got {v}")
        self.width = width
        self.height = height
        self._cells: List[List[Cell]] = []
        self._passages: Set[EdgeKey] = set()
        # Row-major indices (y * width + x) of open cells, kept sorted.
        self._open: List[int] = []
        self.initialize()

    def initialize(self) -> None:
        """Discard all state and build a fresh, fully walled cell set."""
        self._passages = set()
        self._open = []
        self._cells = [
            [Cell(self, x, y) for x in range(self.width)]
            for y in range(self.height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        if not self.in_bounds(x, y):
            return None
        return self._cells[y][x]

    def has_wall(self, x: int, y: int, direction: Direction) -> bool:
        return edge_key(x, y, direction) not in self._passages

    def set_wall(self, x: int, y: int, direction: Direction, present: bool) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside {self.width}x{self.height} grid")
        key = edge_key(x, y, direction)
        if present:
            self._passages.discard(key)
        else:
            self._passages.add(key)

    def rows(self) -> List[List[Cell]]:
        return self._cells

    def cells(self) -> Iterator[Cell]:
        # Row-major, the order renderers expect.
        for row in self._cells:
            yield from row

    @property
    def size(self) -> int:
        return self.width * self.height

    def mark_open(self, cell: Cell) -> None:
        """Flag ``cell`` open and index it; the one write path for ``Cell.open``."""
        if cell.open:
            return
        cell.open = True
        bisect.insort(self._open, cell.y * self.width + cell.x)

    def open_indices(self) -> List[int]:
        """Row-major indices of open cells, ascending. Do not mutate."""
        return self._open

    def cell_at_index(self, i: int) -> Cell:
        y, x = divmod(i, self.width)
        return self._cells[y][x]

    def open_count(self) -> int:
        return len(self._open)

    def passage_count(self) -> int:
        """Interior wall-absent edges (start/exit holes are not counted)."""
        return sum(1 for _ in self.passages())

    def passages(self) -> Iterator[Tuple[XY, XY]]:
        """Interior wall-absent edges as sorted coordinate pairs."""
        for key in self._passages:
            a, b = sorted(key)
            if self.in_bounds(*a) and self.in_bounds(*b):
                yield a, b

    @property
    def start(self) -> Optional[Cell]:
        return next((c for c in self.cells() if c.start), None)

    @property
    def exit(self) -> Optional[Cell]:
        return next((c for c in self.cells() if c.exit), None)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, open={self.open_count()})"
