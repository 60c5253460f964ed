"""Lightweight data models used across the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pygame

from .constants import ENEMY_START_Y, ROW_HEIGHT


class Direction(str, Enum):
    """Discrete input actions understood by the player."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"               # switch avatar


@dataclass(frozen=True)
class EnemyState:
    """
    Snapshot of one enemy's motion.

    Attributes
    ----------
    x : float
        Left edge of the sprite, in pixels.
    lane : int
        Lane index the enemy travels along (1-3).
    speed : float
        Horizontal speed in pixels per second, always positive.
    """
    x: float
    lane: int
    speed: float

    @property
    def y(self) -> float:
        return ENEMY_START_Y + self.lane * ROW_HEIGHT


@dataclass(frozen=True)
class Box:
    """
    Float axis-aligned rectangle used for collision tests.

    ``to_rect`` truncates to a pygame.Rect and is only used for drawing.
    """
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def corners(self) -> tuple[tuple[float, float], ...]:
        """Corners clockwise from the top-left."""
        return (
            (self.left, self.top),
            (self.right, self.top),
            (self.right, self.bottom),
            (self.left, self.bottom),
        )

    def to_rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.left), int(self.top), int(self.width), int(self.height))
