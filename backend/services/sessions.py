"""
Session registry - one game per display surface.

Hosts key sessions by whatever identifies a surface (a channel id, a
message id, a terminal). Each surface gets its own SnakeGame, so no snake,
apple or board state is ever shared between sessions.
"""

import logging
from typing import Callable, Dict, Hashable, Optional

from main import SnakeGame

logger = logging.getLogger(__name__)


class SessionRegistry:

    def __init__(self, factory: Callable[[], SnakeGame] = SnakeGame):
        self.factory = factory
        self._sessions: Dict[Hashable, SnakeGame] = {}

    def get(self, surface_id: Hashable) -> Optional[SnakeGame]:
        return self._sessions.get(surface_id)

    def get_or_create(self, surface_id: Hashable) -> SnakeGame:
        game = self._sessions.get(surface_id)
        if game is None:
            game = self.factory()
            self._sessions[surface_id] = game
            logger.debug(f"Created session for surface {surface_id}")
        return game

    def is_running(self, surface_id: Hashable) -> bool:
        game = self._sessions.get(surface_id)
        return game is not None and game.running

    def discard(self, surface_id: Hashable) -> None:
        """Forget a surface's session; a running game is ended first."""
        game = self._sessions.pop(surface_id, None)
        if game is not None:
            game.end_game()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, surface_id: Hashable) -> bool:
        return surface_id in self._sessions
