"""
Frame sinks - where rendered frames are delivered.

A sink only needs to accept a frame; the game engine never reads anything
back from it. Hosts (console, chat bots, tests) supply their own.
"""

import asyncio
import sys
from typing import List, TextIO, Optional

from domain.frame import Frame


class FrameSink:
    """Base class/interface for a display surface."""

    async def send(self, frame: Frame) -> None:
        raise NotImplementedError


class ConsoleFrameSink(FrameSink):
    """Prints each frame to a text stream, optionally pausing after it."""

    def __init__(self, stream: Optional[TextIO] = None, delay: float = 0.0):
        self.stream = stream or sys.stdout
        self.delay = delay

    def format(self, frame: Frame) -> str:
        lines = [f"== {frame.title} ==", frame.description]
        if frame.timestamp is not None:
            lines.append(frame.timestamp.isoformat(timespec="seconds"))
        return "\n".join(lines)

    async def send(self, frame: Frame) -> None:
        print("\n" + self.format(frame) + "\n", file=self.stream, flush=True)
        if self.delay:
            await asyncio.sleep(self.delay)


class RecordingFrameSink(FrameSink):
    """Keeps every frame it receives; used by tests and replays."""

    def __init__(self):
        self.frames: List[Frame] = []

    async def send(self, frame: Frame) -> None:
        self.frames.append(frame)

    @property
    def last(self) -> Optional[Frame]:
        return self.frames[-1] if self.frames else None
