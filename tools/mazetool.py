#!/usr/bin/env python3
import argparse, logging, sys
from snakemaze.config import MazeSettings
from snakemaze.mapgen.generator import generate_from_settings
from snakemaze.render.text import to_ascii, write_tsv

def settings_from_args(args) -> MazeSettings:
    s = MazeSettings.from_env().override(
        width=args.width, height=args.height,
        seed=args.seed, knock_down=args.knock_down,
    )
    if args.random_seed:
        s = s.with_random_seed()
    return s

def cmd_emit(args):
    settings = settings_from_args(args)
    grid = generate_from_settings(settings)
    if args.tsv:
        write_tsv(grid, args.tsv)
        print(f"Wrote {args.tsv}")
    else:
        print("\n".join(to_ascii(grid)))
    if settings.seed is not None:
        print(f"seed={settings.seed}", file=sys.stderr)

def cmd_png(args):
    from snakemaze.render.image import save_png   # Pillow only needed here
    settings = settings_from_args(args)
    grid = generate_from_settings(settings)
    save_png(grid, args.out, cell_size=args.cell)
    print(f"Wrote {args.out}")

def add_maze_args(p):
    p.add_argument('--width', type=int)
    p.add_argument('--height', type=int)
    p.add_argument('--seed', type=int)
    p.add_argument('--random-seed', action='store_true', help="Pick a fresh seed and print it")
    p.add_argument('--knock-down', type=int, help="Extra walls to remove (adds loops)")
    p.add_argument('--verbose', action='store_true')

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    add_maze_args(p1)
    p1.add_argument('--tsv', type=str, help="Write wall codes as TSV instead of ASCII")
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('png')
    add_maze_args(p2)
    p2.add_argument('--out', type=str, required=True)
    p2.add_argument('--cell', type=int, default=16, help="Cell size in pixels")
    p2.set_defaults(func=cmd_png)
    args = p.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except ValueError as e:   # includes InvalidDimensionError
        raise SystemExit(f"mazetool: {e}")

if __name__ == '__main__':
    main()
