# src/mazegen/mapgen/analysis.py
# Structural checks over a grid's link graph (used by tests and tools).

from collections import deque
from typing import FrozenSet, List, Set

from ..grid import Grid, Position

Edge = FrozenSet[Position]


def link_edges(grid: Grid) -> Set[Edge]:
    """Undirected passages, each counted once."""
    edges: Set[Edge] = set()
    for pos in grid.iter_positions():
        for other in grid.links_of(pos):
            edges.add(frozenset((pos, other)))
    return edges


def is_symmetric(grid: Grid) -> bool:
    for pos in grid.iter_positions():
        for other in grid.links_of(pos):
            if not grid.is_linked(other, pos):
                return False
    return True


def reachable_from(grid: Grid, start: Position) -> Set[Position]:
    seen = {start}
    q = deque([start])
    while q:
        pos = q.popleft()
        for nxt in grid.links_of(pos):
            if nxt not in seen:
                seen.add(nxt)
                q.append(nxt)
    return seen


def is_connected(grid: Grid) -> bool:
    return len(reachable_from(grid, (0, 0))) == grid.size


def is_acyclic(grid: Grid) -> bool:
    # A forest on V vertices with C components has exactly V - C edges.
    remaining = set(grid.iter_positions())
    components = 0
    while remaining:
        start = next(iter(remaining))
        remaining -= reachable_from(grid, start)
        components += 1
    return len(link_edges(grid)) == grid.size - components


def links_follow_neighbors(grid: Grid) -> bool:
    """Every link goes to one of the cell's four grid neighbors."""
    for pos in grid.iter_positions():
        allowed = grid.cell(pos).neighbors()
        if any(other not in allowed for other in grid.links_of(pos)):
            return False
    return True


def is_perfect_maze(grid: Grid) -> bool:
    """Spanning tree over neighbor links: symmetric, connected, size-1 edges."""
    return (
        is_symmetric(grid)
        and links_follow_neighbors(grid)
        and len(link_edges(grid)) == grid.size - 1
        and is_connected(grid)
    )


def dead_ends(grid: Grid) -> List[Position]:
    return [pos for pos in grid.iter_positions() if len(grid.links_of(pos)) == 1]
