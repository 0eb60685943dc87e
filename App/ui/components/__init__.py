"""UI components package for modular control widgets."""

from ui.components.stipple_controls import StippleControlsWidget

__all__ = [
    "StippleControlsWidget",
]
