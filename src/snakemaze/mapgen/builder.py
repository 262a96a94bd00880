# src/snakemaze/mapgen/builder.py
# Randomised "snake" carve over a walled grid: grow a spanning tree from a
# west-border start cell, cut an exit, optionally knock extra walls out.

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..directions import ALL_DIRECTIONS, EXIT_SIDES, Direction
from ..grid import Cell, Grid
from ..rng import MazeRandom

logger = logging.getLogger(__name__)

# Chance (out of 100) of extending from the last opened cell instead of a
# random open one. Gives long corridors; keep at exactly 50.
PREFER_PREVIOUS_PERCENT = 50
# Knock-down budget: count * 4 cell draws per attempt.
KNOCK_DOWN_TRIES_PER_WALL = 4


@dataclass
class BuildReport:
    start: Tuple[int, int]
    exit: Optional[Tuple[int, int]]
    iterations: int = 0
    retries: int = 0
    completed: bool = True


def random_open_cell(grid: Grid, rng: MazeRandom) -> Optional[Cell]:
    # Candidates in row-major order, so seeded picks match a full scan.
    i = rng.pick(grid.open_indices())
    return None if i is None else grid.cell_at_index(i)


def random_closed_neighbor(cell: Cell, rng: MazeRandom) -> Optional[Tuple[Direction, Cell]]:
    """Pick a not-yet-open neighbour of ``cell`` (scan order N, E, S, W)."""
    available = []
    for d in ALL_DIRECTIONS:
        n = cell.neighbor(d)
        if n is not None and not n.open:
            available.append((d, n))
    return rng.pick(available)


def open_start(grid: Grid, rng: MazeRandom) -> Cell:
    y = rng.uniform_int(0, grid.height - 1)
    start = grid.cell_at(0, y)
    start.set_wall(Direction.WEST, False)   # entrance hole through the west border
    grid.mark_open(start)
    start.start = True
    return start


def place_exit(grid: Grid, rng: MazeRandom) -> Cell:
    """
    Cut the exit through the top, right or bottom border (never the left,
    where the start is) at a random position along that side.
    """
    side = rng.pick(EXIT_SIDES)
    if side is Direction.NORTH:
        cell = grid.cell_at(rng.uniform_int(0, grid.width - 1), 0)
    elif side is Direction.EAST:
        cell = grid.cell_at(grid.width - 1, rng.uniform_int(0, grid.height - 1))
    else:
        cell = grid.cell_at(rng.uniform_int(0, grid.width - 1), grid.height - 1)
    cell.set_wall(side, False)
    cell.exit = True
    return cell


def build_maze(grid: Grid, rng: MazeRandom) -> BuildReport:
    """
    Carve ``grid`` (freshly initialised, fully walled) into a perfect maze.

    Frontier policy: half the time keep extending from the cell opened last,
    otherwise branch from any open cell. A frontier with no closed neighbour
    just costs a retry; the open count only ever goes up, so the loop ends.
    """
    start = open_start(grid, rng)
    report = BuildReport(start=start.xy, exit=None)

    total = grid.size
    opened = 1
    previous = start

    while opened < total:
        report.iterations += 1
        if rng.uniform_int(1, 100) > 100 - PREFER_PREVIOUS_PERCENT:
            frontier = previous
        else:
            frontier = random_open_cell(grid, rng)

        if frontier is None:
            # Unreachable with at least one open cell; a hit means a logic bug.
            logger.error(
                "build_maze: no open cell after %d iterations (%d/%d open); stopping early",
                report.iterations, opened, total,
            )
            report.completed = False
            break

        target = random_closed_neighbor(frontier, rng)
        if target is None:
            report.retries += 1
            continue

        direction, cell = target
        grid.mark_open(cell)
        frontier.set_wall(direction, False)
        previous = cell
        opened += 1

    report.exit = place_exit(grid, rng).xy
    logger.debug(
        "build_maze %dx%d: start=%s exit=%s iterations=%d retries=%d",
        grid.width, grid.height, report.start, report.exit,
        report.iterations, report.retries,
    )
    return report


def knock_down_walls(grid: Grid, rng: MazeRandom, count: int) -> int:
    """
    Remove up to ``count`` interior walls to add loops. Each removal gets
    ``count * 4`` random open-cell draws to find a cell with an interior
    wall left; an attempt that runs out is skipped. Returns walls removed.
    """
    if count < 0:
        raise ValueError(f"knock-down count must be >= 0, got {count}")

    max_tries = count * KNOCK_DOWN_TRIES_PER_WALL
    removed = 0
    for attempt in range(count):
        for _ in range(max_tries):
            cell = random_open_cell(grid, rng)
            if cell is None:
                break
            directions = cell.open_directions()
            if directions:
                cell.set_wall(rng.pick(directions), False)
                removed += 1
                break
        else:
            logger.debug("knock_down_walls: attempt %d found no wall in %d tries", attempt, max_tries)
    if removed < count:
        logger.debug("knock_down_walls: removed %d of %d requested", removed, count)
    return removed
