"""Shared fixtures: headless pygame, a sprite cache and seeded randomness."""

import os
import random

# no window or sound card needed
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from crossing.logger import GameLogger
from crossing.resources import SpriteCache
from crossing.scoring import ScoreBoard


@pytest.fixture
def sprites():
    return SpriteCache()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scores():
    return ScoreBoard()


@pytest.fixture
def logger(tmp_path):
    return GameLogger(str(tmp_path / "log.md"))


class ScriptedRng:
    """Stand-in for random.Random that replays fixed draws."""

    def __init__(self, draws, pick=-1):
        self.draws = list(draws)
        self.pick = pick

    def random(self):
        return self.draws.pop(0)

    def choice(self, seq):
        return seq[self.pick]


@pytest.fixture
def scripted_rng():
    return ScriptedRng
