# src/snakemaze/render/image.py
# Render a carved grid to a Pillow image: one square per cell, walls as lines,
# start/exit cells tinted. Reads cell flags only.

import os
from typing import Tuple

from PIL import Image, ImageDraw

from ..directions import Direction
from ..grid import Cell, Grid

RGBA = Tuple[int, int, int, int]

BACKGROUND: RGBA = (255, 255, 255, 255)
WALL: RGBA = (24, 24, 24, 255)
START: RGBA = (160, 255, 160, 255)
EXIT: RGBA = (255, 220, 0, 255)

def _fill_color(cell: Cell) -> RGBA:
    if cell.start:
        return START
    if cell.exit:
        return EXIT
    return BACKGROUND

def image_size(grid: Grid, cell_size: int, margin: int) -> Tuple[int, int]:
    return (grid.width * cell_size + 2 * margin + 1,
            grid.height * cell_size + 2 * margin + 1)

def render_image(grid: Grid, cell_size: int = 16, margin: int = 4, wall_width: int = 1) -> Image.Image:
    if cell_size < 2:
        raise ValueError("cell_size must be >= 2")
    canvas = Image.new("RGBA", image_size(grid, cell_size, margin), BACKGROUND)
    draw = ImageDraw.Draw(canvas)

    for cell in grid.cells():
        x0 = margin + cell.x * cell_size
        y0 = margin + cell.y * cell_size
        x1, y1 = x0 + cell_size, y0 + cell_size
        fill = _fill_color(cell)
        if fill != BACKGROUND:
            draw.rectangle((x0 + 1, y0 + 1, x1 - 1, y1 - 1), fill=fill)
        # Each cell draws all four of its walls; shared edges overlap exactly.
        if cell.has_wall(Direction.NORTH):
            draw.line((x0, y0, x1, y0), fill=WALL, width=wall_width)
        if cell.has_wall(Direction.EAST):
            draw.line((x1, y0, x1, y1), fill=WALL, width=wall_width)
        if cell.has_wall(Direction.SOUTH):
            draw.line((x0, y1, x1, y1), fill=WALL, width=wall_width)
        if cell.has_wall(Direction.WEST):
            draw.line((x0, y0, x0, y1), fill=WALL, width=wall_width)
    return canvas

def save_png(grid: Grid, out_png: str, cell_size: int = 16, margin: int = 4) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_image(grid, cell_size=cell_size, margin=margin).save(out_png)
