#!/usr/bin/env python3
"""
CLI tool to run the Snake Discord bot

Usage:
    python run_bot.py
    python run_bot.py --prefix ? --timeout 30

The bot token is read from DISCORD_TOKEN (environment or .env file).
Once running, type `!snake` in a channel to start a game.
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import load_settings  # noqa: E402
from services.discord_host import board_fits_embed, create_bot  # noqa: E402

logger = logging.getLogger(__name__)


def main():
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description='Run the Snake Discord bot',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        '--prefix',
        type=str,
        default=settings.command_prefix,
        help=f'Command prefix (default: {settings.command_prefix})'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=settings.input_timeout,
        help=f'Seconds to wait for a move (default: {settings.input_timeout})'
    )
    parser.add_argument(
        '--width',
        type=int,
        default=settings.board_width,
        help=f'Board width (default: {settings.board_width})'
    )
    parser.add_argument(
        '--height',
        type=int,
        default=settings.board_height,
        help=f'Board height (default: {settings.board_height})'
    )
    args = parser.parse_args()

    if args.width <= 0 or args.height <= 0:
        parser.error("board width and height must be positive")
    symbols = (settings.background_symbol, settings.apple_symbol, settings.snake_symbol)
    if not board_fits_embed(args.width, args.height, symbols):
        parser.error(f"a {args.width}x{args.height} board does not fit in a Discord embed")

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not settings.discord_token:
        logger.error("DISCORD_TOKEN is not set")
        return 1

    settings.command_prefix = args.prefix
    settings.input_timeout = args.timeout
    settings.board_width = args.width
    settings.board_height = args.height

    bot = create_bot(settings)
    # Logging is already configured above
    bot.run(settings.discord_token, log_handler=None)
    return 0


if __name__ == '__main__':
    sys.exit(main())
