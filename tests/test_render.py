import pytest

from snakemaze.directions import walls_from_code
from snakemaze.grid import Grid
from snakemaze.mapgen.generator import generate_maze
from snakemaze.render.image import BACKGROUND, EXIT, START, WALL, render_image, save_png
from snakemaze.render.text import read_tsv, to_ascii, wall_code_matrix, write_tsv

def test_ascii_shape_fresh_grid():
    lines = to_ascii(Grid(3, 2))
    assert len(lines) == 5
    assert all(len(ln) == 7 for ln in lines)
    assert lines[0] == "+-+-+-+"
    assert lines[1] == "| | | |"

def test_wall_codes_agree_with_cells():
    g = generate_maze(6, 4, seed=11)
    for row, codes in zip(g.rows(), wall_code_matrix(g)):
        for cell, code in zip(row, codes):
            assert walls_from_code(code) == cell.walls

def test_tsv_roundtrip(tmp_path):
    g = generate_maze(7, 5, seed=5, knock_down=2)
    path = tmp_path / "maze.tsv"
    write_tsv(g, str(path))
    assert read_tsv(str(path)) == wall_code_matrix(g)

def test_image_pixels_for_golden_2x2():
    g = generate_maze(2, 2, seed=7)   # start (0,1), exit east of (1,0)
    img = render_image(g, cell_size=16, margin=4)
    assert img.size == (41, 41)
    assert img.getpixel((4, 12)) == WALL          # west wall of (0,0)
    assert img.getpixel((12, 28)) == START
    assert img.getpixel((4, 28)) == BACKGROUND    # entrance hole
    assert img.getpixel((28, 12)) == EXIT
    assert img.getpixel((36, 12)) == BACKGROUND   # exit hole

def test_image_rejects_tiny_cells():
    with pytest.raises(ValueError):
        render_image(Grid(2, 2), cell_size=1)

def test_save_png(tmp_path):
    out = tmp_path / "out" / "maze.png"
    save_png(generate_maze(4, 4, seed=1), str(out), cell_size=8)
    assert out.exists() and out.stat().st_size > 0

def test_pygame_surface_size_and_start_tint():
    pytest.importorskip("pygame")
    from snakemaze.render.surface import START as SURF_START, maze_surface
    surf = maze_surface(generate_maze(2, 2, seed=7), cell_size=16, margin=4)
    assert surf.get_size() == (41, 41)
    assert tuple(surf.get_at((12, 28)))[:3] == SURF_START

def test_tsv_file_is_tab_separated(tmp_path):
    path = tmp_path / "golden.tsv"
    write_tsv(generate_maze(2, 2, seed=7), str(path))
    assert path.read_text(encoding="utf-8") == "9\t1\n6\t14\n"
