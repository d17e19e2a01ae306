import argparse
import asyncio
import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple

from config import load_settings
from domain.board import Board
from domain.constants import (
    UP, DOWN, LEFT, RIGHT,
    VALID_MOVES,
    DIRECTION_DELTAS,
    BOARD_WIDTH,
    BOARD_HEIGHT,
    START_LOCATION,
    MAX_APPLE_ATTEMPTS,
    INPUT_TIMEOUT,
    DEFAULT_TITLE,
    DEFAULT_COLOR,
    DEFAULT_GAME_OVER_TITLE,
    BACKGROUND_SYMBOL,
    APPLE_SYMBOL,
    SNAKE_SYMBOL,
)
from domain.errors import AlreadyRunning
from domain.frame import Frame
from domain.game_state import GameState
from domain.snake import Snake
from players import Player, RandomPlayer, ConsolePlayer
from services.frame_sink import FrameSink, ConsoleFrameSink

logger = logging.getLogger(__name__)

# Session states
IDLE = "idle"
ACTIVE = "active"

# End reasons
SELF_COLLISION = "self_collision"
TIMEOUT = "timeout"
ENDED = "ended"
ERROR = "error"


@dataclass
class GameOptions:
    """Display and board options for a game; read at every render."""

    title: str = DEFAULT_TITLE
    color: str = DEFAULT_COLOR
    timestamp: bool = False
    game_over_title: str = DEFAULT_GAME_OVER_TITLE
    background_symbol: str = BACKGROUND_SYMBOL
    apple_symbol: str = APPLE_SYMBOL
    snake_symbol: str = SNAKE_SYMBOL
    board_width: int = BOARD_WIDTH
    board_height: int = BOARD_HEIGHT


class SnakeGame:
    """
    Manages one session:
      - Board (width, height)
      - Snake and its target length
      - Apple
      - Score
      - Running flag (idle <-> active)
    """

    def __init__(self, options: Optional[GameOptions] = None, rng: Optional[random.Random] = None):
        self.options = options or GameOptions()
        self.rng = rng or random.Random()

        self.board: Optional[Board] = None
        self.snake = Snake([START_LOCATION])
        self.apple: Optional[Tuple[int, int]] = None
        self.target_length = 1
        self.score = 0
        self.running = False
        self.turn_number = 0
        self.end_reason: Optional[str] = None

    @property
    def state(self) -> str:
        return ACTIVE if self.running else IDLE

    # -------------------------------
    # Display options (fluent)
    # -------------------------------

    def set_title(self, title: str) -> "SnakeGame":
        self.options.title = title or DEFAULT_TITLE
        return self

    def set_color(self, color: str) -> "SnakeGame":
        self.options.color = color or DEFAULT_COLOR
        return self

    def set_timestamp(self) -> "SnakeGame":
        self.options.timestamp = True
        return self

    # -------------------------------
    # State machine
    # -------------------------------

    def start_game(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        background_symbol: Optional[str] = None
    ) -> Frame:
        """
        Start a new game and return its first frame.

        Raises:
            AlreadyRunning: if this session is still active.
            InvalidDimension: if the board size is not positive.
        """
        if self.running:
            raise AlreadyRunning("A game is already running on this session.")

        self.board = Board(
            width if width is not None else self.options.board_width,
            height if height is not None else self.options.board_height,
            background_symbol or self.options.background_symbol
        )

        # Small boards pull the start cell inside
        start_x, start_y = START_LOCATION
        start = (min(start_x, self.board.width - 1), min(start_y, self.board.height - 1))

        self.score = 0
        self.target_length = 1
        self.turn_number = 0
        self.end_reason = None
        self.snake = Snake([start])
        self.place_apple()
        self.running = True

        logger.info(f"Started {self.board.width}x{self.board.height} game, snake at {start}, apple at {self.apple}")
        return self.board_frame()

    def place_apple(self) -> Optional[Tuple[int, int]]:
        """
        Move the apple to a random cell not covered by the snake.

        Rejection sampling is capped at MAX_APPLE_ATTEMPTS; after that the
        free cells are enumerated. A full board leaves no apple (None).
        """
        for _ in range(MAX_APPLE_ATTEMPTS):
            cell = (self.rng.randrange(self.board.width), self.rng.randrange(self.board.height))
            if cell not in self.snake:
                self.apple = cell
                return cell

        occupied = set(self.snake.positions)
        free_cells = [cell for cell in self.board.cells() if cell not in occupied]
        self.apple = self.rng.choice(free_cells) if free_cells else None
        return self.apple

    def advance(self, direction: str) -> Optional[Frame]:
        """
        Execute one turn:
          1) Ignore the move if no game is running
          2) Compute the next head, wrapping around the edges
          3) Self-collision ends the game
          4) Otherwise move (the tail follows unless the snake is growing)
          5) Eat the apple if the head is on it

        Returns:
            The next frame, the game-over frame, or None when ignored.
        """
        if not self.running:
            logger.debug(f"Ignoring {direction}: no game running")
            return None

        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}; expected one of {sorted(VALID_MOVES)}")

        hx, hy = self.snake.head
        dx, dy = DIRECTION_DELTAS[direction]
        next_head = self.board.wrap((hx + dx, hy + dy))

        if next_head in self.snake:
            self.end_game(SELF_COLLISION)
            return self.game_over_frame()

        self.snake.move_to(next_head, self.target_length)
        self.turn_number += 1
        self._eat_apple()

        return self.board_frame()

    def _eat_apple(self) -> None:
        # Growth takes effect on the next move: the tail is only kept once
        # target_length is larger than the current body.
        if self.apple is not None and self.snake.head == self.apple:
            self.score += 1
            self.target_length += 1
            self.place_apple()
            logger.debug(f"Apple eaten, score {self.score}, next apple at {self.apple}")

    def end_game(self, reason: str = ENDED) -> int:
        """
        Stop the session and return the final score.

        Calling it on a session that is not running changes nothing.
        """
        if not self.running:
            return self.score

        self.running = False
        self.end_reason = reason
        logger.info(f"Game Over: {reason}. Final score {self.score} after {self.turn_number} turns.")
        return self.score

    # -------------------------------
    # Rendering
    # -------------------------------

    def _timestamp(self) -> Optional[datetime]:
        return datetime.now(timezone.utc) if self.options.timestamp else None

    def board_frame(self) -> Frame:
        description = self.board.render(
            self.apple,
            self.snake.positions,
            self.options.apple_symbol,
            self.options.snake_symbol
        )
        return Frame(
            title=self.options.title or DEFAULT_TITLE,
            description=description,
            color=self.options.color or DEFAULT_COLOR,
            timestamp=self._timestamp()
        )

    def game_over_frame(self) -> Frame:
        return Frame(
            title=self.options.game_over_title or DEFAULT_GAME_OVER_TITLE,
            description=f"SCORE: **{self.score}**",
            color=self.options.color or DEFAULT_COLOR,
            timestamp=self._timestamp(),
            game_over=True
        )

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current session as a GameState.
        """
        return GameState(
            turn_number=self.turn_number,
            snake_positions=list(self.snake.positions),
            apple=self.apple,
            score=self.score,
            target_length=self.target_length,
            running=self.running,
            width=self.board.width if self.board else self.options.board_width,
            height=self.board.height if self.board else self.options.board_height,
            end_reason=self.end_reason
        )

    def __repr__(self):
        return f"<SnakeGame state={self.state}, score={self.score}, length={len(self.snake)}>"


# -------------------------------
# Turn loop
# -------------------------------

async def run_session(
    game: SnakeGame,
    player: Player,
    sink: FrameSink,
    width: Optional[int] = None,
    height: Optional[int] = None,
    background_symbol: Optional[str] = None,
    timeout: float = INPUT_TIMEOUT
) -> int:
    """
    Play one game from start to game over.

    Each turn waits for the player's next move, racing it against the
    timeout; whichever finishes first cancels the other. Frames are
    delivered to the sink before the next move is requested.

    Returns:
        The final score.

    Raises:
        AlreadyRunning: if the game is already active.
        Any error raised by the sink or the player; the game is ended
        with the ERROR reason before it propagates.
    """
    first_frame = game.start_game(width, height, background_symbol)

    try:
        await sink.send(first_frame)

        while game.running:
            state = game.get_current_state()
            logger.debug(f"Turn {state.turn_number}, score {state.score}:\n{state.print_board()}")
            try:
                move = await asyncio.wait_for(player.get_move(state), timeout=timeout)
            except asyncio.TimeoutError:
                logger.info(f"No move within {timeout}s, ending game")
                game.end_game(TIMEOUT)
                await sink.send(game.game_over_frame())
                break

            frame = game.advance(move)
            if frame is not None:
                await sink.send(frame)
    finally:
        if game.running:
            logger.warning(f"Turn loop stopped unexpectedly after {game.turn_number} turns")
            game.end_game(ERROR)

    return game.score


# -------------------------------
# Console entry point
# -------------------------------

def main():
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal (w/a/s/d + Enter to move)."
    )
    parser.add_argument("--width", type=int, default=settings.board_width,
                        help="Width of the board in cells")
    parser.add_argument("--height", type=int, default=settings.board_height,
                        help="Height of the board in cells")
    parser.add_argument("--timeout", type=float, default=settings.input_timeout,
                        help="Seconds to wait for a move before the game ends")
    parser.add_argument("--title", type=str, default=settings.title,
                        help="Panel title")
    parser.add_argument("--timestamp", action="store_true", default=settings.timestamp,
                        help="Stamp each frame with the current time")
    parser.add_argument("--autoplay", action="store_true",
                        help="Let a random player make the moves")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for apples (and the autoplayer)")
    args = parser.parse_args()

    if args.width <= 0 or args.height <= 0:
        parser.error("board width and height must be positive")

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    rng = random.Random(args.seed)
    options = GameOptions(
        game_over_title=settings.game_over_title,
        background_symbol=settings.background_symbol,
        apple_symbol=settings.apple_symbol,
        snake_symbol=settings.snake_symbol
    )
    game = SnakeGame(options, rng=rng).set_title(args.title).set_color(settings.color)
    if args.timestamp:
        game.set_timestamp()

    player = RandomPlayer(rng) if args.autoplay else ConsolePlayer()
    score = asyncio.run(run_session(
        game,
        player,
        ConsoleFrameSink(delay=0.3 if args.autoplay else 0.0),
        width=args.width,
        height=args.height,
        timeout=args.timeout
    ))
    print(f"\nFinal score: {score}")


if __name__ == "__main__":
    main()
