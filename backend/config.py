"""
Runtime configuration loaded from the environment (and an optional .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import (
    BOARD_WIDTH,
    BOARD_HEIGHT,
    INPUT_TIMEOUT,
    DEFAULT_TITLE,
    DEFAULT_COLOR,
    DEFAULT_GAME_OVER_TITLE,
    BACKGROUND_SYMBOL,
    APPLE_SYMBOL,
    SNAKE_SYMBOL,
)


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Settings shared by the console game and the chat bot."""

    discord_token: Optional[str] = None
    command_prefix: str = "!"
    board_width: int = BOARD_WIDTH
    board_height: int = BOARD_HEIGHT
    input_timeout: float = INPUT_TIMEOUT
    title: str = DEFAULT_TITLE
    color: str = DEFAULT_COLOR
    timestamp: bool = False
    game_over_title: str = DEFAULT_GAME_OVER_TITLE
    background_symbol: str = BACKGROUND_SYMBOL
    apple_symbol: str = APPLE_SYMBOL
    snake_symbol: str = SNAKE_SYMBOL
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from SNAKE_* / DISCORD_TOKEN environment variables."""
    load_dotenv()

    return Settings(
        discord_token=os.getenv('DISCORD_TOKEN'),
        command_prefix=os.getenv('SNAKE_COMMAND_PREFIX', '!'),
        board_width=int(os.getenv('SNAKE_BOARD_WIDTH', BOARD_WIDTH)),
        board_height=int(os.getenv('SNAKE_BOARD_HEIGHT', BOARD_HEIGHT)),
        input_timeout=float(os.getenv('SNAKE_INPUT_TIMEOUT', INPUT_TIMEOUT)),
        title=os.getenv('SNAKE_TITLE', DEFAULT_TITLE),
        color=os.getenv('SNAKE_COLOR', DEFAULT_COLOR),
        timestamp=_env_bool('SNAKE_TIMESTAMP'),
        game_over_title=os.getenv('SNAKE_GAME_OVER_TITLE', DEFAULT_GAME_OVER_TITLE),
        background_symbol=os.getenv('SNAKE_BACKGROUND_SYMBOL', BACKGROUND_SYMBOL),
        apple_symbol=os.getenv('SNAKE_APPLE_SYMBOL', APPLE_SYMBOL),
        snake_symbol=os.getenv('SNAKE_SNAKE_SYMBOL', SNAKE_SYMBOL),
        log_level=os.getenv('SNAKE_LOG_LEVEL', 'INFO').upper(),
    )
