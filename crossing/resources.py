"""Sprite loading and caching.

Images are loaded once by path and shared by every entity. When an image
is missing (or pygame cannot read it) a placeholder of the standard tile
size is drawn procedurally, so the game is playable without the asset
pack in ``images/``.
"""

from __future__ import annotations

import os

import pygame

from .constants import (
    AVATAR_PATHS,
    ENEMY_HEIGHT,
    ENEMY_SPRITE_PATH,
    ENEMY_TOP_PADDING,
    ENEMY_WIDTH,
    GRASS_BLOCK_PATH,
    SPRITE_SIZE,
    STONE_BLOCK_PATH,
    WATER_BLOCK_PATH,
)

TILE_COLORS = {
    WATER_BLOCK_PATH: (60, 120, 220),
    STONE_BLOCK_PATH: (150, 150, 150),
    GRASS_BLOCK_PATH: (90, 180, 80),
}
AVATAR_COLORS = [
    (70, 110, 200),
    (230, 150, 60),
    (170, 90, 200),
    (240, 120, 170),
    (240, 210, 80),
]
TILE_TOP = 50                      # first opaque row of a block image
TILE_FACE = 85                     # height of the top face of a block


def make_placeholder(path: str) -> pygame.Surface:
    """Draw a stand-in sprite for ``path`` at the asset pack's tile size."""
    surf = pygame.Surface(SPRITE_SIZE, pygame.SRCALPHA)
    width, height = SPRITE_SIZE

    if path in TILE_COLORS:
        color = TILE_COLORS[path]
        side = tuple(max(0, c - 50) for c in color)
        pygame.draw.rect(surf, side, (0, TILE_TOP, width, height - TILE_TOP - 30))
        pygame.draw.rect(surf, color, (0, TILE_TOP, width, TILE_FACE))
    elif path == ENEMY_SPRITE_PATH:
        body = pygame.Rect(0, ENEMY_TOP_PADDING, ENEMY_WIDTH, ENEMY_HEIGHT)
        pygame.draw.ellipse(surf, (200, 40, 40), body)
        pygame.draw.circle(surf, (20, 20, 20), (body.right - 18, body.centery - 8), 5)
        pygame.draw.circle(surf, (20, 20, 20), (body.right - 18, body.centery + 8), 5)
    else:
        idx = AVATAR_PATHS.index(path) if path in AVATAR_PATHS else 0
        color = AVATAR_COLORS[idx % len(AVATAR_COLORS)]
        pygame.draw.ellipse(surf, color, (width // 2 - 22, 100, 44, 50))
        pygame.draw.circle(surf, (250, 220, 190), (width // 2, 85), 22)

    return surf


class SpriteCache:
    """Loads sprites by path and answers size queries synchronously."""

    def __init__(self) -> None:
        self._sprites: dict[str, pygame.Surface] = {}

    def load(self, paths: list[str] | str) -> None:
        """Load one path or a list of paths; already cached paths are skipped."""
        if isinstance(paths, str):
            paths = [paths]
        for path in paths:
            if path not in self._sprites:
                self._sprites[path] = self._load_image(path)

    def get(self, path: str) -> pygame.Surface:
        """Return the sprite for ``path``, loading it on first use."""
        if path not in self._sprites:
            self.load(path)
        return self._sprites[path]

    def size(self, path: str) -> tuple[int, int]:
        return self.get(path).get_size()

    def __contains__(self, path: str) -> bool:
        return path in self._sprites

    def _load_image(self, path: str) -> pygame.Surface:
        if os.path.exists(path):
            try:
                img = pygame.image.load(path)
                # convert_alpha needs a display mode
                if pygame.display.get_surface() is not None:
                    img = img.convert_alpha()
                return img
            except Exception as e:
                print(f"Failed to load sprite {path}: {e}")
        return make_placeholder(path)
