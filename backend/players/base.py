"""
Base player interface for the game engine.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for an input source.

    Each player is responsible for producing the next move for the
    session, given the current game state. The turn loop awaits exactly one
    move per turn and enforces the per-turn timeout around this call.
    """

    async def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
