"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    def __contains__(self, location: Tuple[int, int]) -> bool:
        return location in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def move_to(self, new_head: Tuple[int, int], target_length: int) -> None:
        """Push a new head and drop the tail while longer than target_length."""
        self.positions.appendleft(new_head)
        if len(self.positions) > target_length:
            self.positions.pop()
