"""
Console player - reads moves typed on stdin.
"""

import asyncio
import sys
import threading
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.game_state import GameState
from .base import Player

KEY_BINDINGS = {
    "w": UP, "up": UP,
    "a": LEFT, "left": LEFT,
    "s": DOWN, "down": DOWN,
    "d": RIGHT, "right": RIGHT,
}


def parse_move(text: str) -> Optional[str]:
    """Map a typed line to a direction, or None if it is not one."""
    return KEY_BINDINGS.get(text.strip().lower())


class ConsolePlayer(Player):
    """
    Reads one line per move from a stream.

    Lines are read on a daemon thread and handed to the event loop through a
    queue, so a pending read never keeps the process alive after a timeout.
    Unrecognised lines are skipped.
    """

    def __init__(self, stream=None, prompt: str = "Move (w/a/s/d): "):
        self.stream = stream or sys.stdin
        self.prompt = prompt
        self._queue: Optional[asyncio.Queue] = None
        self._reader: Optional[threading.Thread] = None

    def _start_reader(self) -> None:
        loop = asyncio.get_running_loop()
        self._queue = asyncio.Queue()

        def read_lines():
            for line in self.stream:
                loop.call_soon_threadsafe(self._queue.put_nowait, line)

        self._reader = threading.Thread(target=read_lines, name="console-player", daemon=True)
        self._reader.start()

    async def get_move(self, game_state: GameState) -> str:
        if self._queue is None:
            self._start_reader()

        print(self.prompt, end="", flush=True)
        while True:
            line = await self._queue.get()
            move = parse_move(line)
            if move is not None:
                return move
