"""Recoverable error conditions raised by the stipple pipeline.

AIDEV-NOTE: All errors derive from ValueError so callers that already
guard image loading with ``except ValueError`` also catch these. None of
them leaves pipeline state modified.
"""


class StippleError(ValueError):
    """Base class for stipple pipeline errors."""


class EmptyScene(StippleError):
    """Export or preview requested for a dot list with no dots."""

    def __init__(self, message: str = "No dots to export"):
        super().__init__(message)


class InvalidDimensions(StippleError):
    """Export or preview requested without a valid canvas size."""

    def __init__(self, width=None, height=None):
        self.width = width
        self.height = height
        super().__init__(f"Invalid dimensions: {width}x{height}")


class DegenerateLevels(StippleError):
    """Levels parameters for which the tone curve is undefined."""
