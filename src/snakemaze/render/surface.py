# src/snakemaze/render/surface.py
from __future__ import annotations
import pygame
from typing import Tuple

from ..directions import Direction
from ..grid import Cell, Grid

BACKGROUND = (240, 240, 240)
WALL = (24, 24, 24)
START = (160, 255, 160)
EXIT = (255, 220, 0)

def _fill_color(cell: Cell):
    if cell.start: return START
    if cell.exit:  return EXIT
    return None

def draw_maze(surface: pygame.Surface, grid: Grid, cell_size: int,
              origin: Tuple[int, int] = (0, 0), wall_width: int = 2) -> None:
    """
    Draw every cell row-major onto ``surface`` at ``origin``:
    a tinted square for start/exit, then the walls that are still standing.
    """
    ox, oy = origin
    for cell in grid.cells():
        x0 = ox + cell.x * cell_size
        y0 = oy + cell.y * cell_size
        x1, y1 = x0 + cell_size, y0 + cell_size
        fill = _fill_color(cell)
        if fill is not None:
            surface.fill(fill, pygame.Rect(x0, y0, cell_size, cell_size))
        if cell.has_wall(Direction.NORTH):
            pygame.draw.line(surface, WALL, (x0, y0), (x1, y0), wall_width)
        if cell.has_wall(Direction.EAST):
            pygame.draw.line(surface, WALL, (x1, y0), (x1, y1), wall_width)
        if cell.has_wall(Direction.SOUTH):
            pygame.draw.line(surface, WALL, (x0, y1), (x1, y1), wall_width)
        if cell.has_wall(Direction.WEST):
            pygame.draw.line(surface, WALL, (x0, y0), (x0, y1), wall_width)

def maze_surface(grid: Grid, cell_size: int, margin: int = 4) -> pygame.Surface:
    """Offscreen surface sized to the grid (no display needed)."""
    w = grid.width * cell_size + 2 * margin + 1
    h = grid.height * cell_size + 2 * margin + 1
    surf = pygame.Surface((w, h))
    surf.fill(BACKGROUND)
    draw_maze(surf, grid, cell_size, origin=(margin, margin))
    return surf
