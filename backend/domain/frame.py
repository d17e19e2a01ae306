"""
Frame entity - one render-ready snapshot handed to a display surface.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Frame:
    """
    A rendered panel.

    Attributes:
        title: panel title
        description: the symbol grid, or the game-over summary
        color: accent color name, hex string, or "random"
        timestamp: stamp to show on the panel, None when disabled
        game_over: True for the final summary frame
    """

    title: str
    description: str
    color: str
    timestamp: Optional[datetime] = None
    game_over: bool = False
