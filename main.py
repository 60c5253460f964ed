"""Game entry point"""

from __future__ import annotations

import random

import pygame

from crossing.constants import (
    DEBUG, FONT_NAME, FONT_SIZE_LARGE, FPS, HEIGHT, KEY_BINDINGS, LOG_FILE, WIDTH
)
from crossing.enemy import Enemy
from crossing.logger import GameLogger
from crossing.player import Player
from crossing.resources import SpriteCache
from crossing.scoring import ScoreBoard
from crossing.spawner import make_enemies
from ui import HUD, Board


class Game:
    """
    Main game controller: initializes subsystems, runs the loop, handles input,
    updates entities, and draws the frame.
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize subsystems, load assets, and set initial game state."""
        pygame.init()
        pygame.display.set_caption("Bug Crossing")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
        self.rng = random.Random(seed)
        self.sprites = SpriteCache()
        self.logger = GameLogger(LOG_FILE, debug=DEBUG)

        self.board = Board(self.sprites)
        self.hud = HUD(self.font)
        self.scores = ScoreBoard([self.hud, self.logger])

        # Game state
        self.player = Player(self.sprites, self.scores, self.logger)
        self.enemies: list[Enemy] = make_enemies(self.sprites, self.rng, self.logger)
        self.paused = False
        self.debug = DEBUG

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, update, render; exits on quit request."""
        running = True
        while running:
            # seconds since the previous frame
            dt = self.clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYUP:
                    running = self.handle_key(event.key)

            if not self.paused:
                self.update(dt)

            self.draw()

        pygame.quit()

    def update(self, dt: float) -> None:
        """Advance every entity one tick, enemies first, in roster order."""
        for enemy in self.enemies:
            enemy.update(dt, self.player)
        self.player.update(dt)

    # --------------------------------- Input ----------------------------------------

    def handle_key(self, key: int) -> bool:
        """
        Dispatch a released key. Returns False when the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_p:
            self.toggle_pause()
        elif key == pygame.K_b:
            self.debug = not self.debug
            self.logger.debug_enabled = self.debug
        elif not self.paused:
            self.player.handle_input(KEY_BINDINGS.get(key))
        return True

    def toggle_pause(self) -> None:
        self.logger.debug("pause/unpause")
        self.paused = not self.paused
        self.logger.log_pause(self.paused)

    # --------------------------------- Rendering ------------------------------------

    def draw(self) -> None:
        """Compose the frame: board → enemies → player → HUD."""
        self.board.draw(self.screen)
        for enemy in self.enemies:
            enemy.render(self.screen, self.debug)
        self.player.render(self.screen, self.debug)
        self.hud.draw(self.screen, self.paused, self.debug)
        pygame.display.flip()


def main() -> None:
    Game().run()


if __name__ == "__main__":
    main()
