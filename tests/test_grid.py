# tests/test_grid.py
import pytest

from mazegen.grid import (
    Grid, ALL_WALLS, WALL_EAST, WALL_NORTH, WALL_SOUTH, WALL_WEST,
)
from mazegen.rng import PMRandom

BORDER = "+" + "---+" * 10
CLOSED_TOP = "|" + "   |" * 10

def closed_grid_lines(rows=10):
    lines = [BORDER]
    for _ in range(rows):
        lines += [CLOSED_TOP, BORDER]
    return lines

def as_text(lines):
    return "\n".join(lines) + "\n"

def test_north_east_south_west():
    g = Grid(10, 10)
    assert g.north_of((0, 0)) is None
    assert g.north_of((1, 0)) is None
    assert g.north_of((1, 1)) == (1, 0)
    assert g.north_of((2, 3)) == (2, 2)
    assert g.east_of((2, 3)) == (3, 3)
    assert g.east_of((9, 3)) is None
    assert g.west_of((0, 3)) is None
    assert g.east_of((9, 9)) is None
    assert g.north_of((9, 9)) == (9, 8)
    assert g.west_of((9, 9)) == (8, 9)
    assert g.south_of((9, 9)) is None

def test_neighbor_relations_are_symmetric():
    g = Grid(4, 7)
    for p in g.iter_positions():
        n, s, e, w = g.north_of(p), g.south_of(p), g.east_of(p), g.west_of(p)
        if n is not None:
            assert g.south_of(n) == p
        if s is not None:
            assert g.north_of(s) == p
        if e is not None:
            assert g.west_of(e) == p
        if w is not None:
            assert g.east_of(w) == p

def test_out_of_range_queries_return_none():
    g = Grid(3, 4)
    for p in [(-1, 0), (0, -1), (4, 0), (0, 3), (100, 100)]:
        assert g.north_of(p) is None
        assert g.south_of(p) is None
        assert g.east_of(p) is None
        assert g.west_of(p) is None
        assert g.wall_bitmask(p) is None
        assert g.cell(p) is None
        assert g.links_of(p) == []
        assert not g.is_linked(p, (0, 0))

def test_zero_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid(0, 5)
    with pytest.raises(ValueError):
        Grid(5, 0)

def test_iter_positions_row_major_and_restartable():
    g = Grid(2, 3)
    want = [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
    assert list(g.iter_positions()) == want
    assert list(g.iter_positions()) == want
    assert len(g) == 6

def test_iter_rows():
    g = Grid(3, 2)
    assert list(g.iter_rows()) == [
        [(0, 0), (1, 0)],
        [(0, 1), (1, 1)],
        [(0, 2), (1, 2)],
    ]

def test_link_and_unlink_bidirectional():
    g = Grid(3, 3)
    g.link((1, 1), (1, 2), True)
    assert g.is_linked((1, 1), (1, 2)) and g.is_linked((1, 2), (1, 1))
    g.unlink((1, 2), (1, 1), True)
    assert not g.is_linked((1, 1), (1, 2)) and not g.is_linked((1, 2), (1, 1))

def test_link_one_way():
    g = Grid(3, 3)
    g.link((0, 0), (1, 0), False)
    assert g.links_of((0, 0)) == [(1, 0)]
    assert g.links_of((1, 0)) == []
    g.unlink((0, 0), (1, 0), False)
    assert g.links_of((0, 0)) == []

def test_link_out_of_range_raises():
    g = Grid(2, 2)
    with pytest.raises(IndexError):
        g.link((0, 0), (0, -1), True)
    with pytest.raises(IndexError):
        g.link((5, 5), (0, 0), True)
    # nothing half-written
    assert g.links_of((0, 0)) == []

def test_link_north_and_east_helpers():
    g = Grid(2, 2)
    assert g.link_north((0, 0)) is None
    assert g.link_east((1, 0)) is None
    assert g.link_north((1, 1)) == (1, 0)
    assert g.link_east((0, 1)) == (1, 1)
    assert g.links_of((1, 1)) == [(0, 1), (1, 0)]

def test_regenerate_clears_links_keeps_topology():
    g = Grid(3, 3)
    before = [(g.north_of(p), g.south_of(p), g.east_of(p), g.west_of(p)) for p in g.iter_positions()]
    g.link((0, 0), (1, 0))
    g.link((1, 1), (1, 0))
    g.regenerate()
    after = [(g.north_of(p), g.south_of(p), g.east_of(p), g.west_of(p)) for p in g.iter_positions()]
    assert after == before
    assert all(g.links_of(p) == [] for p in g.iter_positions())

def test_display_grid():
    g = Grid(10, 10)
    assert str(g) == as_text(closed_grid_lines())

    g.link((1, 1), (1, 2), True)
    lines = closed_grid_lines()
    lines[4] = "+---+   +" + "---+" * 8
    assert str(g) == as_text(lines)

    g.link((9, 9), (8, 9), True)
    lines[19] = "|" + "   |" * 8 + "       |"
    assert g.render_text() == as_text(lines)

def test_wall_bitmask():
    g = Grid(10, 10)
    assert g.wall_bitmask((0, 0)) == ALL_WALLS
    assert g.wall_bitmask((5, 5)) == ALL_WALLS
    g.link((1, 1), (1, 2))
    assert g.wall_bitmask((1, 1)) == WALL_WEST | WALL_EAST | WALL_NORTH
    assert g.wall_bitmask((1, 2)) == WALL_WEST | WALL_SOUTH | WALL_EAST
    g.link((1, 1), (2, 1))
    assert g.wall_bitmask((1, 1)) == 0b1001
    assert g.wall_bitmask((2, 1)) == 0b1110

def test_bitmask_matrix_shape():
    g = Grid(2, 3)
    assert g.bitmask_matrix() == [[15, 15, 15], [15, 15, 15]]

def test_random_position_in_bounds():
    g = Grid(4, 6)
    rng = PMRandom.from_seed(99)
    for _ in range(50):
        assert g.in_bounds(g.random_position(rng))

def test_cell_neighbors_order_and_boundaries():
    g = Grid(3, 3)
    assert g.cell((1, 1)).neighbors() == [(1, 0), (1, 2), (2, 1), (0, 1)]
    assert g.cell((0, 0)).neighbors() == [(0, 1), (1, 0)]
    assert Grid(1, 1).cell((0, 0)).neighbors() == []
