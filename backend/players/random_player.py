"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List

from domain.constants import DIRECTION_DELTAS, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids self-collisions.

    Edges wrap around, so walls are never a concern.
    """

    def __init__(self, rng: random.Random = None):
        self.rng = rng or random.Random()

    async def get_move(self, game_state: GameState) -> str:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]

        safe_moves: List[str] = []
        for move, (dx, dy) in sorted(DIRECTION_DELTAS.items()):
            next_pos = ((head_x + dx) % game_state.width, (head_y + dy) % game_state.height)
            # Every current segment counts, the tail included
            if next_pos in snake_positions:
                continue
            safe_moves.append(move)

        # If no safe moves, just return a random move (we'll die anyway)
        if not safe_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(safe_moves)
