from __future__ import annotations

import pygame

from .constants import (
    AVATAR_PATHS,
    CENTROID_OFFSET_Y,
    COL_WIDTH,
    COLLISIONS,
    DEBUG_CIRCLE_COLOR,
    GOAL_ROW,
    GOALS,
    NUM_COLS,
    NUM_ROWS,
    PLAYER_OFFSET_Y,
    PLAYER_RADIUS,
    PLAYER_START,
    ROW_HEIGHT,
)
from .logger import GameLogger
from .models import Direction
from .resources import SpriteCache
from .scoring import ScoreBoard, ScoreSink


class Player:
    """
    The avatar crossing the board, one grid cell per key press.

    The player never moves on its own. Its pixel position and centroid
    are derived from the grid cell every time ``move_to`` runs; stepping
    onto the water row (row 0) counts a crossing and puts the player back
    on the start tile within the same call.
    """

    def __init__(self, sprites: SpriteCache, score_sink: ScoreSink | None = None,
                 logger: GameLogger | None = None,
                 avatars: list[str] | None = None) -> None:
        self.sprites = sprites
        self.score_sink = score_sink if score_sink is not None else ScoreBoard()
        self.logger = logger
        self.avatar_list = list(avatars) if avatars else list(AVATAR_PATHS)
        self.avatar_index = 0
        self.radius = PLAYER_RADIUS
        self.col, self.row = PLAYER_START
        self.x = 0
        self.y = 0
        self.centroid: tuple[float, float] = (0.0, 0.0)
        self.collision_count = 0
        self.goal_count = 0

        self.sprites.load(self.avatar_list)
        self.move_to(self.col, self.row)

    @property
    def sprite(self) -> str:
        return self.avatar_list[self.avatar_index]

    @property
    def grid_position(self) -> tuple[int, int]:
        return (self.col, self.row)

    # ------------------------------- Input & Movement ----------------------------

    def handle_input(self, direction: Direction | str | None) -> None:
        """
        Apply one key press.

        Moves that would leave the 5x6 grid are ignored, as are unknown
        keys. The current cell is re-applied afterwards in every case.
        """
        if self.logger:
            self.logger.debug(f"handling input [{direction}]")

        try:
            action = Direction(direction) if direction is not None else None
        except ValueError:
            action = None

        if action is Direction.UP and self.row > 0:
            self.row -= 1
        elif action is Direction.DOWN and self.row < NUM_ROWS - 1:
            self.row += 1
        elif action is Direction.RIGHT and self.col < NUM_COLS - 1:
            self.col += 1
        elif action is Direction.LEFT and self.col > 0:
            self.col -= 1
        elif action is Direction.SPACE:
            self.change_avatar()

        self.move_to(self.col, self.row)

    def move_to(self, col: int, row: int) -> None:
        """Place the player on a grid cell; the water row scores and resets."""
        self.col = col
        self.row = row
        self.x = col * COL_WIDTH
        self.y = PLAYER_OFFSET_Y + row * ROW_HEIGHT

        width, height = self.sprites.size(self.sprite)
        self.centroid = (self.x + width / 2, self.y + height / 2 + CENTROID_OFFSET_Y)

        if row == GOAL_ROW:
            self.goal_count += 1
            self.score_sink.set_score(GOALS, self.goal_count)
            if self.logger:
                self.logger.log_goal(col, self.goal_count)
            self.reset()

    def reset(self) -> None:
        self.move_to(*PLAYER_START)

    def change_avatar(self) -> None:
        self.avatar_index = (self.avatar_index + 1) % len(self.avatar_list)
        if self.logger:
            self.logger.log_avatar(self.avatar_index, self.sprite)

    def register_collision(self) -> None:
        """Called by an enemy that caught the player."""
        self.reset()
        self.collision_count += 1
        self.score_sink.set_score(COLLISIONS, self.collision_count)

    def update(self, dt: float) -> None:
        # input driven only
        pass

    # --------------------------------- Drawing -----------------------------------

    def render(self, surf: pygame.Surface, debug: bool = False) -> None:
        surf.blit(self.sprites.get(self.sprite), (self.x, self.y))
        if debug:
            self.draw_hitbox(surf)

    def draw_hitbox(self, surf: pygame.Surface) -> None:
        """Outline the collision circle for debugging."""
        center = (int(self.centroid[0]), int(self.centroid[1]))
        pygame.draw.circle(surf, DEBUG_CIRCLE_COLOR, center, self.radius, 1)
