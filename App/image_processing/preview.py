"""Raster preview of a stipple dot list."""

import math
from typing import Sequence

from PIL import Image, ImageDraw

from models import Dot

from .errors import EmptyScene, InvalidDimensions
from .svg_export import scene_colors
from .utils import validate_dimensions


def paint_preview(
    dots: Sequence[Dot],
    width: float,
    height: float,
    invert: bool = False,
    target: "Image.Image | None" = None,
    allow_empty: bool = False,
) -> Image.Image:
    """Paint dots as filled circles onto a raster surface.

    Args:
        dots: Dots in emission order
        width: Canvas width
        height: Canvas height
        invert: White dots on black instead of black dots on white
        target: Image to paint into (must be width x height), a new RGB
            image is created if None
        allow_empty: Paint just the background for an empty dot list
            instead of raising

    Returns:
        The painted image (target itself when given)

    Raises:
        EmptyScene: If there are no dots and allow_empty is False
        InvalidDimensions: If the size is invalid or target does not match
    """
    validate_dimensions(width, height)
    if not dots and not allow_empty:
        raise EmptyScene("No dots to preview")

    size = (math.ceil(width), math.ceil(height))
    background, foreground = scene_colors(invert)

    if target is None:
        target = Image.new("RGB", size, background)
    elif target.size != size:
        raise InvalidDimensions(width, height)

    draw = ImageDraw.Draw(target)
    # Full repaint so the result only depends on the dot list
    draw.rectangle((0, 0, size[0], size[1]), fill=background)

    for dot in dots:
        r = dot.size
        draw.ellipse((dot.x - r, dot.y - r, dot.x + r, dot.y + r), fill=foreground)

    return target
