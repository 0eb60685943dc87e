"""Stipple sampling: turn a prepared bitmap into a dot list.

AIDEV-NOTE: This module contains the single place where dots are created.
The grid walk is deterministic; only the emission test and the jitter use
the random stream, so a seeded generator reproduces a dot list exactly.
"""

import math

import numpy as np

from models import GRID_BASE_SPACING, Dot, StippleParams, StippleScene

from .errors import InvalidDimensions
from .utils import (
    apply_levels,
    to_pixel_array,
    validate_dimensions,
    validate_params,
)


def grid_spacing(density: float) -> int:
    """Grid step in pixels for a density value (higher = tighter grid)."""
    return max(1, math.floor(GRID_BASE_SPACING / density))


def compute_stipple(
    pixels,
    width: float,
    height: float,
    params: StippleParams,
    rng: "np.random.Generator | None" = None,
    seed: "int | None" = None,
) -> StippleScene:
    """Render image as stipples (dots) based on brightness.

    Darker areas get a higher target value and therefore a higher chance of
    a dot; invert swaps that so bright areas attract dots instead.

    Args:
        pixels: RGB PIL image or (H, W, 3) array at the working size
        width: Working canvas width in pixels
        height: Working canvas height in pixels
        params: Stipple parameters
        rng: Random generator to draw from (takes precedence over seed)
        seed: Seed for a fresh generator when rng is not given

    Returns:
        StippleScene with dots in row-major emission order

    Raises:
        InvalidDimensions: If width/height are not positive or exceed
            the pixel buffer
        DegenerateLevels: If the levels parameters are degenerate
    """
    validate_dimensions(width, height)
    validate_params(params)

    # Fractional canvases cover the partial last pixel row and column
    grid_width = int(math.ceil(width))
    grid_height = int(math.ceil(height))

    pixel_array = to_pixel_array(pixels)
    buffer_height, buffer_width = pixel_array.shape[:2]
    if grid_width > buffer_width or grid_height > buffer_height:
        raise InvalidDimensions(width, height)

    if rng is None:
        rng = np.random.default_rng(seed)

    spacing = grid_spacing(params.density)

    # Nearest sample at each grid origin, no averaging over the cell
    samples = pixel_array[0:grid_height:spacing, 0:grid_width:spacing].astype(np.float64)
    brightness = samples.sum(axis=-1) / 3.0
    adjusted = apply_levels(
        brightness, params.blacks, params.mids, params.highlights
    )
    targets = adjusted if params.invert else 255.0 - adjusted

    threshold = params.threshold
    jitter_amount = spacing * params.randomness
    dot_size = float(params.dot_size)

    dots = []
    append_dot = dots.append
    random = rng.random

    for row, y in enumerate(range(0, grid_height, spacing)):
        for col, x in enumerate(range(0, grid_width, spacing)):
            target_value = targets[row, col]
            draw = random() * 255.0

            if target_value > threshold and draw < target_value:
                jitter_x = (random() - 0.5) * jitter_amount
                jitter_y = (random() - 0.5) * jitter_amount
                append_dot(Dot(x=x + jitter_x, y=y + jitter_y, size=dot_size))

    return StippleScene(dots=tuple(dots), width=width, height=height)
