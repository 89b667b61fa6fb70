# src/mazegen/mapgen/sidewinder.py
# Sidewinder carving: grow eastward runs, close each one by opening a single
# passage north from a random member of the run.

from typing import List
from ..grid import Grid, Position
from ..rng import RandomSource


def should_close_out(grid: Grid, pos: Position, rng: RandomSource) -> bool:
    # Eastern edge always closes. Elsewhere a coin flip decides, but only
    # below the top row; the top row never closes early, so it becomes one run.
    # The coin is drawn only when it matters.
    if grid.east_of(pos) is None:
        return True
    if grid.north_of(pos) is None:
        return False
    return rng.getrandbits(1) == 1


def sidewinder(grid: Grid, rng: RandomSource) -> None:
    run: List[Position] = []
    for row in grid.iter_rows():
        run.clear()
        for pos in row:
            run.append(pos)
            if should_close_out(grid, pos, rng):
                member = rng.choice(run)
                grid.link_north(member)   # no-op in the top row
                run.clear()
            else:
                grid.link_east(pos)
