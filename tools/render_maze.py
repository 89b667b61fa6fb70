#!/usr/bin/env python3
# Render a generated maze to PNG using Pillow.

import argparse
from mazegen.config import DEFAULTS
from mazegen.mapgen.generator import ALGORITHMS, generate_maze
from mazegen.render.image import save_png

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=DEFAULTS.rows)
    ap.add_argument("--columns", type=int, default=DEFAULTS.columns)
    ap.add_argument("--algo", choices=sorted(ALGORITHMS), default=DEFAULTS.algorithm)
    ap.add_argument("--seed", type=int, default=DEFAULTS.seed, help="Seed for a repeatable maze")
    ap.add_argument("--cell", type=int, default=16, help="Cell size in pixels")
    ap.add_argument("--out", type=str, default="out/maze.png", help="Where to write the PNG")
    args = ap.parse_args()

    grid = generate_maze(args.rows, args.columns, args.algo, seed=args.seed)
    save_png(grid, args.out, cell_size=args.cell)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
