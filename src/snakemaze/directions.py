# Compass directions shared by the grid, builder and renderers.
# Order N, E, S, W is the iteration order everywhere (neighbour scans, codes).

from enum import IntEnum
from typing import Tuple

class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def bit(self) -> int:
        # Wall-code bit used by the TSV / text export: N=1, E=2, S=4, W=8.
        return 1 << self.value

_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

ALL_DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

# Sides an exit may be cut through; the start always sits on the west border.
EXIT_SIDES = (Direction.NORTH, Direction.EAST, Direction.SOUTH)

ALL_WALLS = 0b1111

def walls_from_code(code: int) -> dict:
    return {d: bool(code & d.bit) for d in ALL_DIRECTIONS}
