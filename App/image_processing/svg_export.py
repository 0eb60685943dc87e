"""SVG serialization of stipple dot lists."""

from pathlib import Path
from typing import Sequence

import svg

from models import DEFAULT_EXPORT_FILENAME, Dot

from .errors import EmptyScene
from .utils import validate_dimensions

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def scene_colors(invert: bool) -> "tuple[str, str]":
    """Return (background, foreground) color names for a render."""
    if invert:
        return "black", "white"
    return "white", "black"


def _fmt(value: float) -> str:
    """Fixed two-decimal formatting for SVG coordinates."""
    return f"{value:.2f}"


def export_vector(
    dots: Sequence[Dot],
    width: float,
    height: float,
    invert: bool = False,
) -> str:
    """Convert a dot list to an SVG document string.

    Args:
        dots: Dots in emission order
        width: Canvas width the dots were generated against
        height: Canvas height the dots were generated against
        invert: White dots on black instead of black dots on white

    Returns:
        SVG content as string, identical for identical input

    Raises:
        EmptyScene: If there are no dots
        InvalidDimensions: If width or height is zero or unset
    """
    if not dots:
        raise EmptyScene()
    validate_dimensions(width, height)

    background, foreground = scene_colors(invert)

    elements: list[svg.Element] = [
        svg.Rect(width=width, height=height, fill=background),
    ]
    # AIDEV-NOTE: svg.py types coordinates as numbers; strings keep the
    # fixed precision exactly as written
    elements.extend(
        svg.Circle(
            cx=_fmt(dot.x),  # type: ignore[arg-type]
            cy=_fmt(dot.y),  # type: ignore[arg-type]
            r=_fmt(dot.size),  # type: ignore[arg-type]
            fill=foreground,
        )
        for dot in dots
    )

    document = svg.SVG(width=width, height=height, elements=elements)
    return f"{XML_DECLARATION}\n{document.as_str()}"


def save_vector(
    dots: Sequence[Dot],
    width: float,
    height: float,
    invert: bool = False,
    path: "str | Path" = DEFAULT_EXPORT_FILENAME,
) -> Path:
    """Export a dot list and write it to disk as UTF-8.

    Raises:
        EmptyScene: If there are no dots
        InvalidDimensions: If width or height is zero or unset
    """
    content = export_vector(dots, width, height, invert)

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return output_path
