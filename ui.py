"""Tile board and HUD"""

import pygame

from crossing.constants import (
    BG_COLOR, COL_WIDTH, COLLISIONS, FONT_NAME, FONT_SIZE_SMALL, GOALS,
    HUD_PADDING, HUD_SHADOW, NUM_COLS, ROW_HEIGHT, ROW_IMAGES, TEXT_COLOR
)
from crossing.resources import SpriteCache


class Board:
    """The 5x6 tile board: water on top, three stone lanes, two grass rows."""

    def __init__(self, sprites: SpriteCache) -> None:
        self.sprites = sprites
        self.sprites.load(ROW_IMAGES)

    def draw(self, surf: pygame.Surface) -> None:
        surf.fill(BG_COLOR)
        for row, path in enumerate(ROW_IMAGES):
            tile = self.sprites.get(path)
            for col in range(NUM_COLS):
                surf.blit(tile, (col * COL_WIDTH, row * ROW_HEIGHT))


class HUD:
    """Heads-Up Display showing crossings and bug hits; also a score sink."""

    LABELS = {GOALS: "Crossings", COLLISIONS: "Bugs"}

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)
        self.scores: dict[str, int] = {GOALS: 0, COLLISIONS: 0}

    def set_score(self, counter: str, value: int) -> None:
        self.scores[counter] = value

    def _blit_shadowed(self, surf: pygame.Surface, font: pygame.font.Font,
                       text: str, pos: tuple[int, int], color=TEXT_COLOR) -> pygame.Surface:
        shadow = font.render(text, True, HUD_SHADOW)
        surf.blit(shadow, (pos[0] + 1, pos[1] + 1))
        rendered = font.render(text, True, color)
        surf.blit(rendered, pos)
        return rendered

    def draw(self, surf: pygame.Surface, paused: bool = False, debug: bool = False) -> None:
        """Render the counters, plus PAUSED / DEBUG markers when active."""
        current_width = surf.get_width()
        current_height = surf.get_height()

        # LEFT SIDE: crossings, RIGHT SIDE: bugs
        left = f"{self.LABELS[GOALS]}: {self.scores.get(GOALS, 0)}"
        self._blit_shadowed(surf, self.font, left, (HUD_PADDING, HUD_PADDING))

        right = f"{self.LABELS[COLLISIONS]}: {self.scores.get(COLLISIONS, 0)}"
        right_w = self.font.size(right)[0]
        self._blit_shadowed(surf, self.font, right, (current_width - right_w - HUD_PADDING, HUD_PADDING))

        if debug:
            debug_w, debug_h = self.small_font.size("DEBUG")
            self._blit_shadowed(surf, self.small_font, "DEBUG",
                                (current_width - debug_w - HUD_PADDING, current_height - debug_h - HUD_PADDING),
                                color=(255, 255, 0))

        if paused:
            pause_text = self.font.render("PAUSED", True, (255, 255, 100))
            text_rect = pause_text.get_rect(center=(current_width // 2, current_height // 2))
            # Semi-transparent background
            bg_rect = text_rect.inflate(20, 10)
            bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
            bg_surf.fill((0, 0, 0, 128))
            surf.blit(bg_surf, bg_rect)
            surf.blit(pause_text, text_rect)
