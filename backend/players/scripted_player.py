"""
Scripted player - replays a fixed list of moves.

Used as a test harness for the turn loop. Once the script runs out the
player never answers, so the turn loop's timeout ends the game.
"""

import asyncio
from collections import deque
from typing import Iterable, List

from domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):

    def __init__(self, moves: Iterable[str]):
        self.moves = deque(moves)
        self.seen_states: List[GameState] = []

    async def get_move(self, game_state: GameState) -> str:
        self.seen_states.append(game_state)
        if not self.moves:
            # Park until the turn loop cancels us
            await asyncio.Event().wait()
        return self.moves.popleft()
