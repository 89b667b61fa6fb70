# src/mazegen/mapgen/binary_tree.py
# Binary-tree carving: every cell opens a passage north or east.
# Visits cells row-major, so the top row and the east column end up as
# single unbroken corridors.

from typing import List
from ..grid import Grid, Position
from ..rng import RandomSource


def binary_tree(grid: Grid, rng: RandomSource) -> None:
    """
    For each cell pick uniformly between its north and east neighbors
    (whichever exist) and link to it. The north-east corner has neither and
    is skipped, which leaves exactly size-1 links.
    """
    candidates: List[Position] = []
    for pos in grid.iter_positions():
        candidates.clear()
        north = grid.north_of(pos)
        if north is not None:
            candidates.append(north)
        east = grid.east_of(pos)
        if east is not None:
            candidates.append(east)
        if candidates:
            grid.link(pos, rng.choice(candidates), True)
