"""Data models and constants for the Stipple Studio application."""

from dataclasses import dataclass, field
from pathlib import Path

# AIDEV-NOTE: Working canvas cap - larger images are scaled down to fit
MAX_CANVAS_WIDTH = 800
MAX_CANVAS_HEIGHT = 600

# Grid spacing at density 1; spacing = max(1, GRID_BASE_SPACING // density)
GRID_BASE_SPACING = 20

DEFAULT_EXPORT_FILENAME = "stippled-image.svg"

# Configuration file path
CONFIG_FILE = Path.home() / ".stipple_studio_config.json"

# Slider ranges for each tunable parameter: (min, max, step)
PARAM_RANGES = {
    "density": (1.0, 10.0, 0.5),
    "dot_size": (0.5, 3.0, 0.1),
    "threshold": (0.0, 150.0, 1.0),
    "randomness": (0.0, 1.0, 0.05),
    "blacks": (0.0, 1.0, 0.01),
    "mids": (0.01, 0.99, 0.01),
    "highlights": (0.0, 1.0, 0.01),
}


@dataclass(frozen=True)
class Dot:
    """A single stipple dot.

    AIDEV-NOTE: Coordinates are in canvas space (working image pixels),
    size is the circle radius in the same units.
    """

    x: float
    y: float
    size: float


@dataclass(frozen=True)
class StippleScene:
    """A dot list paired with the canvas dimensions it was generated for.

    AIDEV-NOTE: Scenes are replaced wholesale on every recompute. Exports
    always read width/height from the same scene as the dots.
    """

    dots: "tuple[Dot, ...]" = ()
    width: float = 0
    height: float = 0

    def __len__(self) -> int:
        return len(self.dots)


@dataclass
class StippleParams:
    """Full tuning surface for the stipple pass."""

    density: float = 5.0  # 1-10, higher = tighter grid
    dot_size: float = 1.2  # dot radius in canvas units
    threshold: float = 50.0  # 0-150 on the 0-255 scale
    randomness: float = 1.0  # 0-1, jitter as a fraction of grid spacing

    # Draw dots in bright areas on a black background
    invert: bool = False

    # Levels adjustment (all 0-1)
    blacks: float = 0.0
    mids: float = 0.5
    highlights: float = 1.0


@dataclass
class AppSettings:
    """Application preferences persisted by ConfigManager."""

    max_width: int = MAX_CANVAS_WIDTH
    max_height: int = MAX_CANVAS_HEIGHT
    export_filename: str = DEFAULT_EXPORT_FILENAME

    # Fixed seed for reproducible stipples, None = fresh randomness each pass
    seed: "int | None" = None

    params: StippleParams = field(default_factory=StippleParams)
