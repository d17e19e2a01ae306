"""
Domain entities for the chat snake game engine.

This module contains the core game entities that are independent of
the messaging host (discord, console, test harness).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_DELTAS
from .errors import SnakeGameError, InvalidDimension, AlreadyRunning
from .board import Board
from .snake import Snake
from .game_state import GameState
from .frame import Frame

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_DELTAS',
    'SnakeGameError', 'InvalidDimension', 'AlreadyRunning',
    'Board',
    'Snake',
    'GameState',
    'Frame',
]
