"""Test raster preview painting.

Tests for image_processing.preview:
    - background and dot colors, normal and inverted
    - painting into a caller-provided target
    - repainting is idempotent
    - EmptyScene / InvalidDimensions contract
    - preview agrees with the SVG export for the same dots

Run:
    pytest tests/test_preview.py -v
"""

import xml.etree.ElementTree as ET

import pytest
from PIL import Image

from image_processing import (
    EmptyScene,
    InvalidDimensions,
    compute_stipple,
    export_vector,
    paint_preview,
)
from models import Dot, StippleParams

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

DOTS = [Dot(10.0, 10.0, 3.0), Dot(30.0, 20.0, 2.0)]


def test_paints_dots_on_background():
    image = paint_preview(DOTS, 40, 30)

    assert image.size == (40, 30)
    assert image.mode == "RGB"
    assert image.getpixel((10, 10)) == BLACK
    assert image.getpixel((30, 20)) == BLACK
    assert image.getpixel((0, 29)) == WHITE


def test_inverted_colors():
    image = paint_preview(DOTS, 40, 30, invert=True)

    assert image.getpixel((10, 10)) == WHITE
    assert image.getpixel((0, 29)) == BLACK


def test_paints_into_target():
    target = Image.new("RGB", (40, 30), (255, 0, 0))
    result = paint_preview(DOTS, 40, 30, target=target)

    assert result is target
    # Stale content is replaced by the background
    assert target.getpixel((39, 0)) == WHITE
    assert target.getpixel((10, 10)) == BLACK


def test_target_size_mismatch():
    with pytest.raises(InvalidDimensions):
        paint_preview(DOTS, 40, 30, target=Image.new("RGB", (20, 20)))


def test_repaint_is_idempotent():
    first = paint_preview(DOTS, 40, 30)
    second = paint_preview(DOTS, 40, 30, target=first.copy())

    assert first.tobytes() == second.tobytes()


def test_empty_scene_raises():
    with pytest.raises(EmptyScene):
        paint_preview([], 40, 30)


def test_empty_scene_allowed_paints_background():
    image = paint_preview([], 40, 30, invert=True, allow_empty=True)

    assert image.getcolors() == [(40 * 30, BLACK)]


@pytest.mark.parametrize("width, height", [(0, 30), (40, 0)])
def test_invalid_dimensions(width, height):
    with pytest.raises(InvalidDimensions):
        paint_preview(DOTS, width, height)



@pytest.mark.parametrize("invert", [False, True])
def test_preview_matches_vector_export(gradient_image, invert):
    params = StippleParams(dot_size=2.0, threshold=0, invert=invert)
    scene = compute_stipple(gradient_image, 120, 80, params, seed=4)
    document = export_vector(scene.dots, scene.width, scene.height, invert)
    image = paint_preview(scene.dots, scene.width, scene.height, invert)

    root = ET.fromstring(document.encode("utf-8"))
    circles = [el for el in root if el.tag.rsplit("}", 1)[-1] == "circle"]
    assert len(circles) == len(scene) > 0

    colors = {"black": BLACK, "white": WHITE}
    checked = 0
    for circle in circles:
        cx, cy = float(circle.get("cx")), float(circle.get("cy"))
        # Jitter can push a centre off the canvas
        if not (0 <= cx <= 119 and 0 <= cy <= 79):
            continue
        assert image.getpixel((round(cx), round(cy))) == colors[circle.get("fill")]
        checked += 1
    assert checked > 0
