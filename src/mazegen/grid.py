# src/mazegen/grid.py
# Rectangular cell grid: static neighbor topology plus mutable link sets.
# Positions are (column, row), zero-based; row 0 is the top (north) edge.

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple

Position = Tuple[int, int]

# Wall bitmask layout handed to renderers
WALL_WEST = 0b0001
WALL_SOUTH = 0b0010
WALL_EAST = 0b0100
WALL_NORTH = 0b1000
ALL_WALLS = WALL_WEST | WALL_SOUTH | WALL_EAST | WALL_NORTH


@dataclass
class Cell:
    pos: Position
    north: Optional[Position] = None
    south: Optional[Position] = None
    east: Optional[Position] = None
    west: Optional[Position] = None
    _links: Set[Position] = field(default_factory=set, repr=False)

    def link(self, pos: Position) -> None:
        self._links.add(pos)

    def unlink(self, pos: Position) -> None:
        self._links.discard(pos)

    def links(self) -> List[Position]:
        return sorted(self._links)

    def is_linked(self, pos: Optional[Position]) -> bool:
        # A missing neighbor is never linked.
        return pos is not None and pos in self._links

    def neighbors(self) -> List[Position]:
        return [p for p in (self.north, self.south, self.east, self.west) if p is not None]

    def clear(self) -> None:
        self._links.clear()


class Grid:
    """
    rows x columns cells stored row-major as cells[row][column].

    Neighbor fields are computed once here and never change; only the
    per-cell link sets are mutated (by link/unlink/regenerate).
    """

    def __init__(self, rows: int, columns: int):
        if rows < 1 or columns < 1:
            raise ValueError(f"grid needs at least one row and one column, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self.cells: List[List[Cell]] = [
            [Cell((x, y)) for x in range(columns)] for y in range(rows)
        ]
        self._configure_cells()

    def _configure_cells(self) -> None:
        for cell in self._each_cell():
            x, y = cell.pos
            cell.north = (x, y - 1) if y > 0 else None
            cell.south = (x, y + 1) if y < self.rows - 1 else None
            cell.east = (x + 1, y) if x < self.columns - 1 else None
            cell.west = (x - 1, y) if x > 0 else None

    def _each_cell(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def __len__(self) -> int:
        return self.size

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.columns and 0 <= y < self.rows

    def cell(self, pos: Position) -> Optional[Cell]:
        # Guard first: negative indices would otherwise wrap around.
        if not self.in_bounds(pos):
            return None
        x, y = pos
        return self.cells[y][x]

    def _cell_for_link(self, pos: Position) -> Cell:
        c = self.cell(pos)
        if c is None:
            raise IndexError(f"position {pos} outside {self.columns}x{self.rows} grid")
        return c

    # ---------- traversal ----------
    def iter_positions(self) -> Iterator[Position]:
        """Every position in row-major order; each call starts over."""
        for y in range(self.rows):
            for x in range(self.columns):
                yield (x, y)

    def iter_rows(self) -> Iterator[List[Position]]:
        """One left-to-right list of positions per row, top to bottom."""
        for y in range(self.rows):
            yield [(x, y) for x in range(self.columns)]

    def random_position(self, rng) -> Position:
        row = rng.choice(self.cells)
        return rng.choice(row).pos

    # ---------- neighbor queries ----------
    def north_of(self, pos: Position) -> Optional[Position]:
        c = self.cell(pos)
        return c.north if c is not None else None

    def south_of(self, pos: Position) -> Optional[Position]:
        c = self.cell(pos)
        return c.south if c is not None else None

    def east_of(self, pos: Position) -> Optional[Position]:
        c = self.cell(pos)
        return c.east if c is not None else None

    def west_of(self, pos: Position) -> Optional[Position]:
        c = self.cell(pos)
        return c.west if c is not None else None

    # ---------- links ----------
    def link(self, frm: Position, to: Position, bidirectional: bool = True) -> None:
        """
        Open a passage from `frm` to `to` (and back when bidirectional).
        `to` is expected to be a neighbor of `frm`; that is not checked.
        """
        a = self._cell_for_link(frm)
        b = self._cell_for_link(to) if bidirectional else None
        a.link(to)
        if b is not None:
            b.link(frm)

    def unlink(self, frm: Position, to: Position, bidirectional: bool = True) -> None:
        a = self._cell_for_link(frm)
        b = self._cell_for_link(to) if bidirectional else None
        a.unlink(to)
        if b is not None:
            b.unlink(frm)

    def link_north(self, pos: Position) -> Optional[Position]:
        north = self.north_of(pos)
        if north is not None:
            self.link(pos, north)
        return north

    def link_east(self, pos: Position) -> Optional[Position]:
        east = self.east_of(pos)
        if east is not None:
            self.link(pos, east)
        return east

    def is_linked(self, a: Position, b: Optional[Position]) -> bool:
        c = self.cell(a)
        return c is not None and c.is_linked(b)

    def links_of(self, pos: Position) -> List[Position]:
        c = self.cell(pos)
        return c.links() if c is not None else []

    def regenerate(self) -> None:
        """Drop every link; the neighbor topology is left as built."""
        for cell in self._each_cell():
            cell.clear()

    # ---------- rendering ----------
    def wall_bitmask(self, pos: Position) -> Optional[int]:
        """
        West=bit0, south=bit1, east=bit2, north=bit3. A side is a wall when
        there is no neighbor that way or the neighbor is not linked.
        None for positions outside the grid.
        """
        c = self.cell(pos)
        if c is None:
            return None
        mask = 0
        if not c.is_linked(c.west):
            mask |= WALL_WEST
        if not c.is_linked(c.south):
            mask |= WALL_SOUTH
        if not c.is_linked(c.east):
            mask |= WALL_EAST
        if not c.is_linked(c.north):
            mask |= WALL_NORTH
        return mask

    def bitmask_matrix(self) -> List[List[int]]:
        return [[self.wall_bitmask(pos) for pos in row] for row in self.iter_rows()]

    def render_text(self) -> str:
        lines = ["+" + "---+" * self.columns]
        for row in self.cells:
            top = "|"
            bottom = "+"
            for c in row:
                top += "   " + (" " if c.is_linked(c.east) else "|")
                bottom += ("   " if c.is_linked(c.south) else "---") + "+"
            lines.append(top)
            lines.append(bottom)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render_text()

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"

