#!/usr/bin/env python3
import argparse, csv, os
from mazegen.config import DEFAULTS
from mazegen.mapgen.generator import ALGORITHMS, generate_maze

GOLDEN_SEED = 1
GOLDEN_SIZE = 10

def write_tsv(mat, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        for r in mat:
            w.writerow(r)

def build(args):
    return generate_maze(args.rows, args.columns, args.algo, seed=args.seed)

def cmd_show(args):
    print(build(args), end="")

def cmd_emit(args):
    write_tsv(build(args).bitmask_matrix(), args.out)
    print(f"Wrote {args.out}")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    for name in sorted(ALGORITHMS):
        grid = generate_maze(GOLDEN_SIZE, GOLDEN_SIZE, name, seed=GOLDEN_SEED)
        path = os.path.join(args.outdir, f"{name}_{GOLDEN_SIZE}x{GOLDEN_SIZE}_seed{GOLDEN_SEED}.txt")
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(grid.render_text())
    print(f"Wrote golden mazes to {args.outdir}")

def add_maze_args(p):
    p.add_argument('--rows', type=int, default=DEFAULTS.rows)
    p.add_argument('--columns', type=int, default=DEFAULTS.columns)
    p.add_argument('--algo', choices=sorted(ALGORITHMS), default=DEFAULTS.algorithm)
    p.add_argument('--seed', type=int, default=DEFAULTS.seed)

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('show')
    add_maze_args(p1)
    p1.set_defaults(func=cmd_show)
    p2 = sub.add_parser('emit')
    add_maze_args(p2)
    p2.add_argument('--out', type=str, required=True)
    p2.set_defaults(func=cmd_emit)
    p3 = sub.add_parser('golden')
    p3.add_argument('--outdir', type=str, default=os.path.join("data", "golden_mazes"))
    p3.set_defaults(func=cmd_golden)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
