from __future__ import annotations

import random

from .constants import ENEMY_LANES
from .enemy import Enemy, random_lane
from .logger import GameLogger
from .resources import SpriteCache


def make_enemies(sprites: SpriteCache, rng: random.Random | None = None,
                 logger: GameLogger | None = None) -> list[Enemy]:
    """
    Build the fixed enemy roster: one bug per lane plus one extra bug on
    a random lane.

    Every bug starts at the left edge with its own random speed and shares
    ``rng`` so a seeded game is reproducible.
    """
    rng = rng or random.Random()
    lanes = list(ENEMY_LANES) + [random_lane(rng)]
    return [Enemy(lane, sprites, rng=rng, logger=logger) for lane in lanes]
