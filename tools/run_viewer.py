#!/usr/bin/env python3
# Minimal interactive maze viewer.
# - ENTER: carve a new maze into the same grid
# - A: switch algorithm (sidewinder <-> binary_tree)
# - ESC: quit
# - 60 Hz fixed loop

import argparse
import pygame
from mazegen.config import DEFAULTS, MazeConfig
from mazegen.grid import Grid
from mazegen.mapgen.generator import ALGORITHMS, carve
from mazegen.render.tileset import Tileset
from mazegen.rng import make_rng

def dump_bitmasks(grid: Grid):
    for pos in grid.iter_positions():
        print(f"[viewer] cell: {pos}, index: {grid.wall_bitmask(pos):04b}")

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=DEFAULTS.rows)
    ap.add_argument("--columns", type=int, default=DEFAULTS.columns)
    ap.add_argument("--algo", choices=sorted(ALGORITHMS), default=DEFAULTS.algorithm)
    ap.add_argument("--seed", type=int, default=DEFAULTS.seed,
                    help="Seed the first maze; later ones continue the same stream")
    ap.add_argument("--tile", type=int, default=DEFAULTS.cell_size, help="Tile size in pixels")
    ap.add_argument("--verbose", action="store_true", help="Print every cell's wall bitmask")
    args = ap.parse_args()

    cfg = MazeConfig(rows=args.rows, columns=args.columns, algorithm=args.algo,
                     seed=args.seed, cell_size=args.tile)

    pygame.init()
    pygame.display.set_caption("Maze")
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode(cfg.window_size)

    tiles = Tileset(cfg.cell_size)
    grid = Grid(cfg.rows, cfg.columns)
    rng = make_rng(cfg.seed)
    algorithms = sorted(ALGORITHMS)
    algo = cfg.algorithm

    def regenerate():
        carve(grid, algo, rng)
        if args.verbose:
            dump_bitmasks(grid)

    regenerate()
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RETURN:
                    regenerate()
                elif ev.key == pygame.K_a:
                    algo = algorithms[(algorithms.index(algo) + 1) % len(algorithms)]
                    print(f"[viewer] algorithm: {algo}")
                    regenerate()

        screen.fill((255, 255, 255))
        for (x, y) in grid.iter_positions():
            screen.blit(tiles.get(grid.wall_bitmask((x, y))), (x * cfg.cell_size, y * cfg.cell_size))

        pygame.display.set_caption(f"Maze {cfg.columns}x{cfg.rows} [{algo}]")
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
