"""Incremental playback of analyzed images.

AIDEV-NOTE: Qt-free. The UI supplies a FrameClock and a Surface; the
headless ManualFrameClock and ArraySurface implement the same interfaces.
"""

from .clock import FrameClock, ManualFrameClock
from .scheduler import PlaybackScheduler
from .session import PaintingSession
from .state import FrameBatch, advance, begin, reset_state
from .surface import ArraySurface, ColorSource, Surface

__all__ = [
    "ArraySurface",
    "ColorSource",
    "FrameBatch",
    "FrameClock",
    "ManualFrameClock",
    "PaintingSession",
    "PlaybackScheduler",
    "Surface",
    "advance",
    "begin",
    "reset_state",
]
