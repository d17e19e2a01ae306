"""
Player implementations for the snake game.

A player is the input source of a session: it produces one direction
per turn.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .console_player import ConsolePlayer, parse_move

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'ConsolePlayer',
    'parse_move',
]
