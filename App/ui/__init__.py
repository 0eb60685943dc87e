"""UI components for Stipple Studio.

This package contains the desktop shell around the stipple pipeline:
file import, parameter controls, preview and SVG export.
"""

from ui.console_panel import ConsolePanel
from ui.main_window import StippleWindow

__all__ = [
    "StippleWindow",
    "ConsolePanel",
]
