"""
Game constants for snakegame.
"""

# Movement directions as (dx, dy) unit vectors; y grows downward on screen
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Game-over reasons
WALL = "wall"
SELF = "self"
WIN = "win"

# Listener events
EVENT_RESET = "reset"
EVENT_TICK = "tick"
EVENT_PAUSE = "pause"
EVENT_GAME_OVER = "game_over"
