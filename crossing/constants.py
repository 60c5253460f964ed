"""Game-wide constants for Bug Crossing.

Screen and board layout, enemy and player tuning, avatar list, key
bindings, colors, font sizes, asset paths and logging configuration.
"""

import os

import pygame

WIDTH, HEIGHT = 505, 606
FPS = 60
BG_COLOR = (255, 255, 255)
TEXT_COLOR = (235, 235, 235)
HUD_SHADOW = (20, 20, 20)
HUD_PADDING = 8
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_LARGE = 22

# Board
NUM_COLS = 5
NUM_ROWS = 6
COL_WIDTH = 101
ROW_HEIGHT = 83
SPRITE_SIZE = (101, 171)           # every image in the asset pack shares this size

# Enemy tuning
ENEMY_START_X = -100
ENEMY_START_Y = -20
ENEMY_END_X = 500
ENEMY_MAX_SPEED = 400              # px/s
ENEMY_WIDTH = 96
ENEMY_HEIGHT = 60
ENEMY_TOP_PADDING = 79             # transparent rows above the bug's body
VERTEX_TOLERANCE = 13              # rounded corners of the bug sprite
ENEMY_LANES = (1, 2, 3)
LANE_CHANGE_PROBABILITY = 0.5

# Player tuning
PLAYER_START = (2, 5)
PLAYER_RADIUS = 35
PLAYER_OFFSET_Y = -10
CENTROID_OFFSET_Y = 15
GOAL_ROW = 0

# Score counters
GOALS = "goals"
COLLISIONS = "collisions"

DEBUG = False
DEBUG_BOX_COLOR = (255, 255, 0)
DEBUG_CIRCLE_COLOR = (255, 0, 0)

# Asset paths
ROOT_DIR = os.path.dirname(os.path.dirname(__file__))
IMAGES_DIR = os.path.join(ROOT_DIR, "images")
ENEMY_SPRITE_PATH = os.path.join(IMAGES_DIR, "enemy-bug.png")
WATER_BLOCK_PATH = os.path.join(IMAGES_DIR, "water-block.png")
STONE_BLOCK_PATH = os.path.join(IMAGES_DIR, "stone-block.png")
GRASS_BLOCK_PATH = os.path.join(IMAGES_DIR, "grass-block.png")
AVATAR_PATHS = [
    os.path.join(IMAGES_DIR, "char-boy.png"),
    os.path.join(IMAGES_DIR, "char-cat-girl.png"),
    os.path.join(IMAGES_DIR, "char-horn-girl.png"),
    os.path.join(IMAGES_DIR, "char-pink-girl.png"),
    os.path.join(IMAGES_DIR, "char-princess-girl.png"),
]
ROW_IMAGES = [
    WATER_BLOCK_PATH,              # top row is the goal
    STONE_BLOCK_PATH,
    STONE_BLOCK_PATH,
    STONE_BLOCK_PATH,
    GRASS_BLOCK_PATH,
    GRASS_BLOCK_PATH,
]

# Key bindings (fired on key release)
KEY_BINDINGS = {
    pygame.K_SPACE: "space",
    pygame.K_LEFT: "left",
    pygame.K_UP: "up",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
}

# Log file settings
LOG_FILE = os.path.join(ROOT_DIR, "log.md")
