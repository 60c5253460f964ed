"""Tests for sprite loading and placeholders."""

import pygame

from crossing.constants import AVATAR_PATHS, ENEMY_SPRITE_PATH, SPRITE_SIZE, WATER_BLOCK_PATH
from crossing.resources import SpriteCache, make_placeholder


class TestPlaceholders:
    def test_missing_files_use_tile_size(self, sprites, tmp_path):
        missing = str(tmp_path / "nope.png")
        assert sprites.size(missing) == SPRITE_SIZE

    def test_known_sprites_have_placeholders(self):
        for path in [ENEMY_SPRITE_PATH, WATER_BLOCK_PATH, *AVATAR_PATHS]:
            assert make_placeholder(path).get_size() == SPRITE_SIZE

    def test_bug_placeholder_is_transparent_above_body(self):
        bug = make_placeholder(ENEMY_SPRITE_PATH)
        assert bug.get_at((48, 10)).a == 0
        assert bug.get_at((48, 109)).a == 255


class TestSpriteCache:
    def test_loads_real_image(self, tmp_path):
        path = str(tmp_path / "tiny.png")
        pygame.image.save(pygame.Surface((12, 34)), path)
        cache = SpriteCache()
        cache.load([path])
        assert path in cache
        assert cache.size(path) == (12, 34)

    def test_unreadable_image_falls_back(self, tmp_path, capsys):
        path = tmp_path / "broken.png"
        path.write_bytes(b"not a png")
        cache = SpriteCache()
        assert cache.size(str(path)) == SPRITE_SIZE
        assert "Failed to load sprite" in capsys.readouterr().out

    def test_cached_once(self, sprites):
        sprites.load(ENEMY_SPRITE_PATH)
        first = sprites.get(ENEMY_SPRITE_PATH)
        sprites.load([ENEMY_SPRITE_PATH])
        assert sprites.get(ENEMY_SPRITE_PATH) is first
