"""Utility functions for image preparation and tone mapping.

AIDEV-NOTE: This module contains the helpers shared by the sampling pass and
the exporters: canvas fitting, pixel access, levels adjustment and input
validation.
"""

import math

import numpy as np
from PIL import Image

from models import MAX_CANVAS_HEIGHT, MAX_CANVAS_WIDTH, StippleParams

from .errors import DegenerateLevels, InvalidDimensions


def fit_to_canvas(
    src_width: int,
    src_height: int,
    max_width: int = MAX_CANVAS_WIDTH,
    max_height: int = MAX_CANVAS_HEIGHT,
) -> "tuple[int, int]":
    """Calculate working dimensions for an image of the given size.

    Args:
        src_width: Source width in pixels
        src_height: Source height in pixels
        max_width: Maximum working width
        max_height: Maximum working height

    Returns:
        Tuple of (width, height) in whole pixels

    AIDEV-NOTE: Images are only ever scaled down, uniformly, so aspect
    ratio is preserved. Images within the cap are used unchanged.
    """
    validate_dimensions(src_width, src_height)

    if src_width <= max_width and src_height <= max_height:
        return int(src_width), int(src_height)

    scale = min(max_width / src_width, max_height / src_height)
    width = max(1, round(src_width * scale))
    height = max(1, round(src_height * scale))
    return width, height


def prepare_image(
    image: Image.Image,
    max_width: int = MAX_CANVAS_WIDTH,
    max_height: int = MAX_CANVAS_HEIGHT,
) -> "tuple[Image.Image, int, int]":
    """Convert an image to RGB and resample it to its working size.

    Args:
        image: Decoded source image in any mode
        max_width: Maximum working width
        max_height: Maximum working height

    Returns:
        Tuple of (RGB image at working size, width, height)
    """
    width, height = fit_to_canvas(image.width, image.height, max_width, max_height)

    # Transparent areas read as white paper, not black ink
    if image.mode in ("RGBA", "LA") or (
        image.mode == "P" and "transparency" in image.info
    ):
        rgba = image.convert("RGBA")
        background = Image.new("RGB", rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.getchannel("A"))
        rgb_image = background
    else:
        rgb_image = image.convert("RGB")

    if rgb_image.size != (width, height):
        rgb_image = rgb_image.resize((width, height), Image.Resampling.LANCZOS)

    return rgb_image, width, height


def to_pixel_array(pixels) -> np.ndarray:
    """Return an (H, W, 3) array view of an RGB image or array."""
    if isinstance(pixels, Image.Image):
        pixels = pixels.convert("RGB")
    array = np.asarray(pixels)
    if array.ndim == 2:
        # Grayscale buffer, replicate into three channels
        array = np.stack([array, array, array], axis=-1)
    return array[..., :3]


def validate_levels(blacks: float, mids: float, highlights: float) -> None:
    """Raise DegenerateLevels if the levels curve is undefined."""
    if not 0.0 < mids < 1.0:
        raise DegenerateLevels(
            f"Midtones must be strictly between 0 and 1, got {mids}"
        )
    if highlights == blacks:
        raise DegenerateLevels(
            f"Highlights and blacks must differ, both are {blacks}"
        )


def validate_params(params: StippleParams) -> None:
    """Reject parameter sets the sampling pass cannot handle.

    Raises:
        DegenerateLevels: If the levels curve is undefined
        ValueError: If density is not positive
    """
    if params.density <= 0:
        raise ValueError(f"Density must be positive, got {params.density}")
    validate_levels(params.blacks, params.mids, params.highlights)


def validate_dimensions(width, height) -> None:
    """Raise InvalidDimensions unless both dimensions are positive."""
    if not width or not height or width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)


def apply_levels(value, blacks: float = 0.0, mids: float = 0.5, highlights: float = 1.0):
    """Apply a blacks/mids/highlights levels adjustment.

    Args:
        value: Brightness on the 0-255 scale (scalar or numpy array)
        blacks: Input level mapped to black (0-1)
        mids: Midtone control, 0.5 leaves midtones unchanged,
            lower lightens, higher darkens
        highlights: Input level mapped to white (0-1)

    Returns:
        Adjusted brightness on the 0-255 scale, same shape as value

    Raises:
        DegenerateLevels: If mids is not in (0, 1) or highlights == blacks
    """
    validate_levels(blacks, mids, highlights)

    normalized = np.asarray(value, dtype=np.float64) / 255.0

    # Black and highlight clipping
    normalized = np.clip((normalized - blacks) / (highlights - blacks), 0.0, 1.0)

    # Midtone gamma
    gamma = math.log(0.5) / math.log(mids)
    adjusted = np.power(normalized, gamma) * 255.0

    if adjusted.ndim == 0:
        return float(adjusted)
    return adjusted
