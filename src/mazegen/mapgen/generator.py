# src/mazegen/mapgen/generator.py
# Algorithm registry and the one-call "build me a maze" entry point.

from typing import Callable, Dict, Optional

from ..grid import Grid
from ..rng import RandomSource, make_rng
from .binary_tree import binary_tree
from .sidewinder import sidewinder

Algorithm = Callable[[Grid, RandomSource], None]

ALGORITHMS: Dict[str, Algorithm] = {
    "binary_tree": binary_tree,
    "sidewinder": sidewinder,
}


def get_algorithm(name: str) -> Algorithm:
    try:
        return ALGORITHMS[name]
    except KeyError:
        valid = ", ".join(sorted(ALGORITHMS))
        raise ValueError(f"unknown algorithm {name!r} (expected one of: {valid})") from None


def carve(grid: Grid, algorithm: str, rng: RandomSource) -> Grid:
    """Clear any previous maze on `grid` and carve a new one in place."""
    fn = get_algorithm(algorithm)
    grid.regenerate()
    fn(grid, rng)
    return grid


def generate_maze(
    rows: int,
    columns: int,
    algorithm: str = "sidewinder",
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> Grid:
    if rng is None:
        rng = make_rng(seed)
    return carve(Grid(rows, columns), algorithm, rng)
