# src/snakemaze/render/text.py
import csv
from typing import List

from ..directions import Direction
from ..grid import Cell, Grid

def wall_code_matrix(grid: Grid) -> List[List[int]]:
    """height×width wall bitmasks (N=1, E=2, S=4, W=8), row-major."""
    return [[cell.wall_code() for cell in row] for row in grid.rows()]

def _marker(cell: Cell) -> str:
    if cell.start:
        return "S"
    if cell.exit:
        return "E"
    return " "

def to_ascii(grid: Grid) -> List[str]:
    """
    Character block of (2*height+1) lines, each 2*width+1 wide.
    Corners are '+', walls '-' and '|', start 'S', exit 'E'.
    """
    lines = []
    for row in grid.rows():
        top = "".join("+" + ("-" if c.has_wall(Direction.NORTH) else " ") for c in row) + "+"
        mid = "".join(("|" if c.has_wall(Direction.WEST) else " ") + _marker(c) for c in row)
        mid += "|" if row[-1].has_wall(Direction.EAST) else " "
        lines.append(top)
        lines.append(mid)
    last = grid.rows()[-1]
    lines.append("".join("+" + ("-" if c.has_wall(Direction.SOUTH) else " ") for c in last) + "+")
    return lines

def write_tsv(grid: Grid, path: str) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t", lineterminator="\n")
        for row in wall_code_matrix(grid):
            w.writerow(row)

def read_tsv(path: str) -> List[List[int]]:
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    return rows
