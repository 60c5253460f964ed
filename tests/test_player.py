"""Tests for player grid movement, goals, avatars and collisions."""

import pygame
import pytest

from crossing.constants import (
    AVATAR_PATHS,
    COLLISIONS,
    GOALS,
    PLAYER_RADIUS,
    PLAYER_START,
)
from crossing.models import Direction
from crossing.player import Player


@pytest.fixture
def player(sprites, scores):
    return Player(sprites, scores)


class TestPosition:
    def test_initial_state(self, player):
        assert player.grid_position == (2, 5)
        assert (player.x, player.y) == (202, 405)
        assert player.radius == PLAYER_RADIUS
        assert player.collision_count == 0
        assert player.goal_count == 0

    def test_centroid_from_sprite_size(self, player):
        # placeholder sprites are 101x171
        assert player.centroid == (202 + 50.5, 405 + 85.5 + 15)

    def test_move_to_recomputes_pixels(self, player):
        player.move_to(0, 3)
        assert (player.x, player.y) == (0, 239)
        assert player.centroid == (50.5, 239 + 85.5 + 15)


class TestInput:
    @pytest.mark.parametrize("direction, expected", [
        ("up", (2, 4)),
        ("down", (2, 5)),
        ("left", (1, 5)),
        ("right", (3, 5)),
        (Direction.LEFT, (1, 5)),
    ])
    def test_single_step(self, player, direction, expected):
        player.handle_input(direction)
        assert player.grid_position == expected

    def test_left_edge(self, player):
        player.move_to(0, 3)
        player.handle_input("left")
        assert player.grid_position == (0, 3)

    def test_right_edge(self, player):
        player.move_to(4, 3)
        player.handle_input("right")
        assert player.grid_position == (4, 3)

    def test_bottom_edge(self, player):
        player.handle_input("down")
        assert player.grid_position == (2, 5)
        assert (player.x, player.y) == (202, 405)

    def test_top_edge_is_the_goal(self, player):
        player.move_to(4, 1)
        player.handle_input("up")
        assert player.grid_position == PLAYER_START

    @pytest.mark.parametrize("direction", [None, "", "jump", 38, "UP"])
    def test_unknown_input_is_ignored(self, player, direction):
        player.move_to(1, 2)
        player.handle_input(direction)
        assert player.grid_position == (1, 2)
        assert player.avatar_index == 0

    def test_one_step_per_event(self, player):
        for _ in range(3):
            player.handle_input("up")
        assert player.grid_position == (2, 2)


class TestGoal:
    def test_crossing_scores_once_and_resets(self, player, scores):
        player.move_to(2, 1)
        player.handle_input("up")
        assert player.goal_count == 1
        assert scores.get(GOALS) == 1
        assert player.grid_position == (2, 5)
        assert (player.x, player.y) == (202, 405)

    def test_full_crossing_from_start(self, player):
        for _ in range(5):
            player.handle_input("up")
        assert player.goal_count == 1
        assert player.grid_position == PLAYER_START

    def test_goal_logged(self, sprites, scores, logger):
        player = Player(sprites, scores, logger)
        player.move_to(3, 0)
        with open(logger.log_file, encoding="utf-8") as f:
            assert "| GOAL | (3, 0) | Crossings: 1 |" in f.read()


class TestAvatar:
    def test_space_cycles_avatar(self, player):
        player.handle_input("space")
        assert player.avatar_index == 1
        assert player.sprite == AVATAR_PATHS[1]
        assert player.grid_position == (2, 5)

    def test_full_cycle_returns_to_first(self, player):
        for _ in range(len(AVATAR_PATHS)):
            player.change_avatar()
        assert player.avatar_index == 0
        assert player.sprite == AVATAR_PATHS[0]

    def test_custom_avatar_list(self, sprites, scores):
        player = Player(sprites, scores, avatars=["a.png", "b.png"])
        player.change_avatar()
        player.change_avatar()
        assert player.sprite == "a.png"


class TestCollision:
    def test_register_collision_resets_and_counts(self, player, scores):
        player.move_to(1, 2)
        player.register_collision()
        assert player.grid_position == PLAYER_START
        assert player.collision_count == 1
        assert scores.get(COLLISIONS) == 1

    def test_counters_only_increase(self, player):
        player.register_collision()
        player.register_collision()
        player.move_to(0, 0)
        assert player.collision_count == 2
        assert player.goal_count == 1

    def test_update_does_not_move(self, player):
        player.update(1.0)
        assert player.grid_position == PLAYER_START


class TestRender:
    def test_debug_draws_collision_circle(self, player):
        surf = pygame.Surface((505, 606))
        player.render(surf, debug=True)
        cx, cy = int(player.centroid[0]), int(player.centroid[1])
        top = range(cy - PLAYER_RADIUS - 2, cy - PLAYER_RADIUS + 3)
        assert any(surf.get_at((cx, y))[:3] == (255, 0, 0) for y in top)

    def test_plain_render_has_no_circle(self, player):
        surf = pygame.Surface((505, 606))
        player.render(surf)
        cx, cy = int(player.centroid[0]), int(player.centroid[1])
        top = range(cy - PLAYER_RADIUS - 2, cy - PLAYER_RADIUS + 3)
        assert not any(surf.get_at((cx, y))[:3] == (255, 0, 0) for y in top)
