"""Centralized styling constants for the ArtReveal UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QColor, QFont

from models import Phase


class PhaseColors:
    """Progress label colors per playback phase."""

    IDLE = "gray"
    OUTLINE = "#c9a227"  # pencil
    COLORING = "#3a7bd5"
    COMPLETE = "green"


class ThemeColors:
    """Application theme colors."""

    BACKGROUND_DARK = QColor(20, 20, 20)

    # Canvas frame around the painting
    CANVAS_BORDER = QColor(60, 60, 60)


class Fonts:
    """Standard application fonts."""

    TITLE = QFont("Georgia", 18)
    SUBTITLE = QFont("Georgia", 10)
    PHASE_LABEL = QFont("Arial", 11)


class Sizes:
    """Standard widget sizes and constraints."""

    # Painting canvas
    CANVAS_MIN_SIZE = (400, 300)
    CANVAS_PADDING = 12  # pixels

    # Buttons and controls
    BUTTON_MIN_WIDTH = 100
    LABEL_MIN_WIDTH = 40

    WINDOW_MIN_SIZE = (900, 750)


COLORS = ThemeColors
FONTS = Fonts
SIZES = Sizes


def phase_stylesheet(phase: Phase) -> str:
    """Generate progress label stylesheet for a playback phase.

    Args:
        phase: Current playback phase

    Returns:
        CSS stylesheet string with appropriate color
    """
    color = getattr(PhaseColors, phase.name, PhaseColors.IDLE)
    return f"color: {color};"

