from __future__ import annotations

# enables forward references and delayed evaluation of type annotations.

import random
from dataclasses import replace
from typing import TYPE_CHECKING

import pygame

from .collision import hits_rounded_box
from .constants import (
    DEBUG_BOX_COLOR,
    ENEMY_END_X,
    ENEMY_HEIGHT,
    ENEMY_LANES,
    ENEMY_MAX_SPEED,
    ENEMY_SPRITE_PATH,
    ENEMY_START_X,
    ENEMY_TOP_PADDING,
    ENEMY_WIDTH,
    LANE_CHANGE_PROBABILITY,
)
from .logger import GameLogger
from .models import Box, EnemyState
from .resources import SpriteCache

if TYPE_CHECKING:
    from .player import Player


# ------------------------------- Transitions ----------------------------------

def advance(state: EnemyState, dt: float) -> EnemyState:
    """Move the enemy ``dt`` seconds along its lane."""
    return replace(state, x=state.x + dt * state.speed)


def random_speed(rng: random.Random) -> float:
    """Uniform speed in [0.1 * MAX_SPEED, 1.1 * MAX_SPEED)."""
    return rng.random() * ENEMY_MAX_SPEED + 0.1 * ENEMY_MAX_SPEED


def random_lane(rng: random.Random) -> int:
    return rng.choice(ENEMY_LANES)


def respawn(state: EnemyState, rng: random.Random) -> EnemyState:
    """
    Send an enemy back to the left edge with a fresh speed.

    Half of the time the lane is redrawn as well; the new lane may equal
    the old one.
    """
    lane = state.lane
    speed = random_speed(rng)
    if rng.random() < LANE_CHANGE_PROBABILITY:
        lane = random_lane(rng)
    return EnemyState(x=ENEMY_START_X, lane=lane, speed=speed)


def step(state: EnemyState, dt: float, rng: random.Random) -> EnemyState:
    """Advance one tick, wrapping around once the enemy leaves the screen."""
    moved = advance(state, dt)
    if moved.x > ENEMY_END_X:
        return respawn(moved, rng)
    return moved


# --------------------------------- Entity -------------------------------------

class Enemy:
    """
    A bug crossing the screen from left to right along one lane.

    Lifecycle:
    - TRAVELING:    moves right at ``speed`` px/s every tick.
    - RESPAWN:      once past the right edge, jumps back to the left edge
                    with a new speed and maybe a new lane, in the same tick.

    Enemies are never destroyed; the roster is built once at startup.
    """

    def __init__(self, lane: int, sprites: SpriteCache,
                 rng: random.Random | None = None,
                 logger: GameLogger | None = None) -> None:
        self.rng = rng or random.Random()
        self.sprites = sprites
        self.sprite = ENEMY_SPRITE_PATH
        self.logger = logger
        self.state = EnemyState(x=ENEMY_START_X, lane=lane, speed=random_speed(self.rng))
        self.sprites.load(self.sprite)

    # ------------------------------- Accessors -----------------------------------

    @property
    def x(self) -> float:
        return self.state.x

    @x.setter
    def x(self, value: float) -> None:
        self.state = replace(self.state, x=value)

    @property
    def y(self) -> float:
        return self.state.y

    @property
    def lane(self) -> int:
        return self.state.lane

    @property
    def speed(self) -> float:
        return self.state.speed

    def set_lane(self, lane: int) -> None:
        self.state = replace(self.state, lane=lane)

    def set_speed(self, speed: float) -> None:
        self.state = replace(self.state, speed=speed)

    def set_random_speed(self) -> None:
        self.set_speed(random_speed(self.rng))

    # ------------------------------- Update & State ------------------------------

    def update(self, dt: float, player: Player) -> bool:
        """
        Move one tick, then test the player for a hit.

        Returns True when the bug caught the player; the player has then
        already been sent back to the start tile.
        """
        self.state = step(self.state, dt, self.rng)

        if self.check_collision(player.centroid, player.radius):
            player.register_collision()
            if self.logger:
                self.logger.debug(f"collision in lane {self.lane} at x={self.x:.1f}")
                self.logger.log_collision(self.lane, self.x, player.collision_count)
            return True
        return False

    def hitbox(self) -> Box:
        """The bug's visible body, without the transparent padding on top."""
        return Box(self.x, self.y + ENEMY_TOP_PADDING, ENEMY_WIDTH, ENEMY_HEIGHT)

    def check_collision(self, centroid: tuple[float, float], radius: float) -> bool:
        return hits_rounded_box(centroid, self.hitbox(), radius)

    # --------------------------------- Drawing -----------------------------------

    def render(self, surf: pygame.Surface, debug: bool = False) -> None:
        surf.blit(self.sprites.get(self.sprite), (self.x, self.y))
        if debug:
            self.draw_hitbox(surf)

    def draw_hitbox(self, surf: pygame.Surface) -> None:
        """Outline the collision box for debugging."""
        pygame.draw.rect(surf, DEBUG_BOX_COLOR, self.hitbox().to_rect(), 3)
