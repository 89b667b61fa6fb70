# src/mazegen/render/tileset.py
from __future__ import annotations
import os
import pygame
from functools import lru_cache
from typing import Optional, Tuple

from ..grid import WALL_EAST, WALL_NORTH, WALL_SOUTH, WALL_WEST

ASSET_DIR = "assets"
ATLAS_PATH = os.path.join(ASSET_DIR, "cell.png")
ATLAS_FRAMES = 16  # one frame per wall bitmask, stacked vertically

FLOOR: Tuple[int, int, int] = (255, 255, 255)
WALL: Tuple[int, int, int] = (0, 0, 0)

def _fallback_tile(mask: int, size: int) -> pygame.Surface:
    img = pygame.Surface((size, size), pygame.SRCALPHA)
    img.fill(FLOOR)
    last = size - 1
    if mask & WALL_NORTH: pygame.draw.line(img, WALL, (0, 0), (last, 0))
    if mask & WALL_SOUTH: pygame.draw.line(img, WALL, (0, last), (last, last))
    if mask & WALL_WEST:  pygame.draw.line(img, WALL, (0, 0), (0, last))
    if mask & WALL_EAST:  pygame.draw.line(img, WALL, (last, 0), (last, last))
    return img

class Tileset:
    """
    Tiny cached loader for wall-bitmask tiles:
      - Uses assets/cell.png (16 square frames stacked top to bottom,
        frame index == bitmask) when it exists
      - Otherwise draws plain line tiles
      - Returns pygame.Surface of exactly (tile_size, tile_size)
    """
    def __init__(self, tile_size: int, atlas_path: str = ATLAS_PATH):
        self.tile_size = tile_size
        self.atlas: Optional[pygame.Surface] = None
        if os.path.exists(atlas_path):
            self.atlas = pygame.image.load(atlas_path).convert_alpha()

    @lru_cache(maxsize=64)
    def get(self, mask: int) -> pygame.Surface:
        if not (0 <= mask < ATLAS_FRAMES):
            raise ValueError(f"wall bitmask out of range: {mask}")
        if self.atlas is None:
            return _fallback_tile(mask, self.tile_size)
        frame = self.atlas.get_width()
        base = self.atlas.subsurface(pygame.Rect(0, mask * frame, frame, frame))
        if base.get_size() == (self.tile_size, self.tile_size):
            return base
        return pygame.transform.scale(base, (self.tile_size, self.tile_size))
