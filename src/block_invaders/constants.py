"""
Constants for the game.
"""

from __future__ import annotations

FPS = 60
WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Block Invaders"
BACKGROUND_COLOR = "black"

PLAYER_SIZE = (30, 10)
PLAYER_SPEED = 5
PLAYER_COLOR = "green"
# distance from the bottom edge to the player's top
PLAYER_BOTTOM_OFFSET = 30

BULLET_SIZE = (3, 10)
BULLET_DY = -7
BULLET_COLOR = "white"

ENEMY_SIZE = (20, 20)
ENEMY_DX = 2
ENEMY_COLOR = "red"

FORMATION_COLUMNS = 5
FORMATION_ROWS = 3
FORMATION_SPACING = 20
FORMATION_OFFSET = (60, 30)
FORMATION_DESCEND_STEP = 20

MESSAGE_FONT = ("serif", 48)
MESSAGE_COLOR = "white"
MESSAGE_BACKGROUND = "black"
CLEARED_MESSAGE = "Stage Clear"
DEFEATED_MESSAGE = "Game Over"
RESTART_LABEL = "Restart"
