"""Centralized styling constants for the Stipple Studio UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QFont


class StatusColors:
    """Status line colors."""

    ERROR = "red"
    IDLE = "gray"


class ThemeColors:
    """Application theme colors."""

    BORDER_DEFAULT = "gray"
    BACKGROUND_PANEL = "#2a2a2a"


class Fonts:
    """Standard application fonts."""

    CONSOLE = QFont("Courier", 9)


class Sizes:
    """Standard widget sizes and constraints."""

    # Console panel
    CONSOLE_MIN_HEIGHT = 100

    # Stipple preview
    PREVIEW_MIN_SIZE = (400, 300)

    # Controls
    LABEL_MIN_WIDTH = 40
    CONTROLS_MIN_WIDTH = 320


# Convenience aliases
FONTS = Fonts
SIZES = Sizes


def panel_stylesheet() -> str:
    """Generate standard panel stylesheet with border and background.

    Returns:
        CSS stylesheet string for panel styling
    """
    return (
        f"border: 1px solid {ThemeColors.BORDER_DEFAULT}; "
        f"background-color: {ThemeColors.BACKGROUND_PANEL};"
    )
