"""
Board entity - the static grid a snake game is drawn on.
"""

from typing import Iterable, List, Optional, Tuple

from .constants import BACKGROUND_SYMBOL
from .errors import InvalidDimension

Location = Tuple[int, int]


class Board:
    """
    A fixed-size grid of background symbols.

    Attributes:
        width, height: board dimensions in cells
        cells_symbols: background symbol per cell, row-major

    The background never changes after construction; apples and snakes are
    only overlaid at render time.
    """

    def __init__(self, width: int, height: int, background_symbol: str = BACKGROUND_SYMBOL):
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)

        self.width = width
        self.height = height
        self.background_symbol = background_symbol
        self.cells_symbols: List[str] = [background_symbol] * (width * height)

    def wrap(self, location: Location) -> Location:
        """Bring a location back onto the board, treating the edges as joined."""
        x, y = location
        return (x % self.width, y % self.height)

    def cells(self) -> List[Location]:
        """All locations of the board in row-major order."""
        return [(x, y) for y in range(self.height) for x in range(self.width)]

    def render_rows(
        self,
        apple: Optional[Location],
        snake: Iterable[Location],
        apple_symbol: str,
        snake_symbol: str
    ) -> List[str]:
        """
        Returns one string per board row with:
        apple_symbol = the apple
        snake_symbol = any snake segment
        background symbol everywhere else
        The apple wins if it shares a cell with the snake.
        """
        occupied = set(snake)
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) == apple:
                    row.append(apple_symbol)
                elif (x, y) in occupied:
                    row.append(snake_symbol)
                else:
                    row.append(self.cells_symbols[y * self.width + x])
            rows.append("".join(row))
        return rows

    def render(
        self,
        apple: Optional[Location],
        snake: Iterable[Location],
        apple_symbol: str,
        snake_symbol: str
    ) -> str:
        """Render the board as a newline separated block ready for a monospace panel."""
        return "\n".join(self.render_rows(apple, snake, apple_symbol, snake_symbol))

    def __repr__(self):
        return f"<Board {self.width}x{self.height}>"
