"""
Game constants for the chat snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (dx, dy) per direction, y grows downwards like the rendered rows
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Board settings
BOARD_WIDTH = 15
BOARD_HEIGHT = 10
START_LOCATION = (5, 5)
MAX_APPLE_ATTEMPTS = 200

# Turn settings
INPUT_TIMEOUT = 60  # seconds to wait for a move before ending the game

# Display defaults
DEFAULT_TITLE = "Snake: The Game"
DEFAULT_COLOR = "random"
DEFAULT_GAME_OVER_TITLE = "Game Over!"
BACKGROUND_SYMBOL = "🟦"
APPLE_SYMBOL = "🍎"
SNAKE_SYMBOL = "🟩"
