"""
GameState entity - a snapshot of a game session at a point in time.
"""

from typing import List, Tuple, Optional


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        turn_number: how many moves have been applied (0-based)
        snake_positions: list of (x, y), head first
        apple: (x, y) of the apple, or None when the board is full
        score: apples eaten so far
        target_length: length the snake is growing towards
        running: whether the session still accepts moves
        width, height: board dimensions
        end_reason: why the session ended, if it has
    """

    def __init__(
        self,
        turn_number: int,
        snake_positions: List[Tuple[int, int]],
        apple: Optional[Tuple[int, int]],
        score: int,
        target_length: int,
        running: bool,
        width: int,
        height: int,
        end_reason: Optional[str] = None
    ):
        self.turn_number = turn_number
        self.snake_positions = snake_positions
        self.apple = apple
        self.score = score
        self.target_length = target_length
        self.running = running
        self.width = width
        self.height = height
        self.end_reason = end_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a plain-text representation of the board with:
        . = empty space
        A = apple
        H = snake head
        T = snake body/tail
        (0,0) is the top left cell, matching the rendered panel.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        if self.apple is not None:
            ax, ay = self.apple
            board[ay][ax] = 'A'

        return "\n".join(' '.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState turn={self.turn_number}, apple={self.apple}, "
            f"length={len(self.snake_positions)}, score={self.score}, running={self.running}>"
        )
