"""UI components for the ArtReveal painting animator.

This package contains the Qt window, canvas and control panel. The painting
core itself lives in image_analysis and playback and does not import Qt.
"""

from ui.canvas import PaintingCanvas
from ui.frame_clock import QtFrameClock
from ui.main_window import PaintingWindow
from ui.playback_panel import PlaybackPanel

__all__ = [
    "PaintingWindow",
    "PaintingCanvas",
    "PlaybackPanel",
    "QtFrameClock",
]
