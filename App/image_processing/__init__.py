"""Image processing pipeline for photo-to-stipple conversion.

AIDEV-NOTE: This package handles the complete pipeline from photograph
to stipple dots and SVG. Organized into modular components:
- processor: Main StippleProcessor orchestrator with change detection
- rendering: Grid sampling and stochastic dot placement
- preview: Raster preview painting
- svg_export: SVG serialization and file export
- utils: Canvas fitting, pixel access and levels adjustment
- errors: Recoverable pipeline errors
"""

from .errors import DegenerateLevels, EmptyScene, InvalidDimensions, StippleError
from .preview import paint_preview
from .processor import StippleProcessor
from .rendering import compute_stipple
from .svg_export import export_vector, save_vector
from .utils import apply_levels

__all__ = [
    "StippleProcessor",
    "compute_stipple",
    "paint_preview",
    "export_vector",
    "save_vector",
    "apply_levels",
    "StippleError",
    "EmptyScene",
    "InvalidDimensions",
    "DegenerateLevels",
]
