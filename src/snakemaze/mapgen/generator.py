# src/snakemaze/mapgen/generator.py
# Request-level entry: fresh grid + fresh random source per call.

import logging
from typing import Optional

from ..config import MazeSettings
from ..grid import Grid
from ..rng import MazeRandom
from .builder import build_maze, knock_down_walls

logger = logging.getLogger(__name__)


def generate_maze(width: int, height: int, seed: Optional[int] = None, knock_down: int = 0) -> Grid:
    grid = Grid(width, height)   # rejects bad dimensions before any carving
    if knock_down < 0:
        raise ValueError(f"knock_down must be >= 0, got {knock_down}")
    rng = MazeRandom(seed)

    build_maze(grid, rng)
    if knock_down > 0:
        removed = knock_down_walls(grid, rng, knock_down)
        logger.debug("knocked down %d/%d walls", removed, knock_down)
    return grid


def generate_from_settings(settings: MazeSettings) -> Grid:
    settings.validate()
    return generate_maze(settings.width, settings.height, settings.seed, settings.knock_down)
