# src/mazegen/render/image.py
# Draw a grid to a Pillow image using nothing but Grid.wall_bitmask().

import os
from typing import Tuple

from PIL import Image, ImageDraw

from ..grid import Grid, WALL_EAST, WALL_NORTH, WALL_SOUTH, WALL_WEST

RGBA = Tuple[int, int, int, int]

WALL_COLOR: RGBA = (0, 0, 0, 255)
FLOOR_COLOR: RGBA = (255, 255, 255, 255)


def render_image(
    grid: Grid,
    cell_size: int = 16,
    wall: RGBA = WALL_COLOR,
    floor: RGBA = FLOOR_COLOR,
) -> Image.Image:
    """
    Image is (columns*cell_size + 1) x (rows*cell_size + 1) so the east and
    south borders land on the last pixel column/row. Shared walls are drawn
    by both cells; that is harmless.
    """
    w = grid.columns * cell_size + 1
    h = grid.rows * cell_size + 1
    img = Image.new("RGBA", (w, h), floor)
    draw = ImageDraw.Draw(img)
    for pos in grid.iter_positions():
        mask = grid.wall_bitmask(pos)
        x, y = pos
        x0, y0 = x * cell_size, y * cell_size
        x1, y1 = x0 + cell_size, y0 + cell_size
        if mask & WALL_NORTH:
            draw.line([(x0, y0), (x1, y0)], fill=wall)
        if mask & WALL_SOUTH:
            draw.line([(x0, y1), (x1, y1)], fill=wall)
        if mask & WALL_WEST:
            draw.line([(x0, y0), (x0, y1)], fill=wall)
        if mask & WALL_EAST:
            draw.line([(x1, y0), (x1, y1)], fill=wall)
    return img


def save_png(grid: Grid, out_png: str, cell_size: int = 16) -> str:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_image(grid, cell_size=cell_size).save(out_png)
    return out_png
