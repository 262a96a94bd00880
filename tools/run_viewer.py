#!/usr/bin/env python3
# Minimal interactive maze viewer.
# - Space: regenerate with the current settings
# - R: randomize seed and regenerate
# - + / -: grow / shrink the (square) maze
# - K / J: one more / one fewer knocked-down wall
# - Esc: quit

import argparse, logging
import pygame
from snakemaze.config import MazeSettings
from snakemaze.mapgen.generator import generate_from_settings
from snakemaze.render.surface import BACKGROUND, draw_maze

MARGIN = 4
MIN_SIZE, MAX_SIZE = 2, 80

def window_size(settings, cell):
    return (settings.width * cell + 2 * MARGIN + 1,
            settings.height * cell + 2 * MARGIN + 1)

def resized(settings, delta):
    n = max(MIN_SIZE, min(MAX_SIZE, settings.width + delta))
    return settings.override(width=n, height=n)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=None, help="Cells per side")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--knock-down", type=int, default=None)
    ap.add_argument("--cell", type=int, default=24, help="Cell size in pixels")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    settings = MazeSettings.from_env().override(
        width=args.size, height=args.size,
        seed=args.seed, knock_down=args.knock_down,
    )

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode(window_size(settings, args.cell))

    grid = generate_from_settings(settings)
    running = True
    while running:
        regen = False
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_SPACE:
                    regen = True
                elif ev.key == pygame.K_r:
                    settings = settings.with_random_seed()
                    regen = True
                elif ev.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    settings = resized(settings, +1)
                    regen = True
                elif ev.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    settings = resized(settings, -1)
                    regen = True
                elif ev.key == pygame.K_k:
                    settings = settings.override(knock_down=settings.knock_down + 1)
                    regen = True
                elif ev.key == pygame.K_j:
                    settings = settings.override(knock_down=max(0, settings.knock_down - 1))
                    regen = True

        if regen:
            # Each request gets a fresh grid; the old one is simply dropped.
            grid = generate_from_settings(settings)
            if screen.get_size() != window_size(settings, args.cell):
                screen = pygame.display.set_mode(window_size(settings, args.cell))

        screen.fill(BACKGROUND)
        draw_maze(screen, grid, args.cell, origin=(MARGIN, MARGIN))
        pygame.display.set_caption(
            f"snakemaze {settings.width}x{settings.height}  seed={settings.seed}  knock-down={settings.knock_down}"
        )
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()

if __name__ == "__main__":
    main()
