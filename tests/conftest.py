"""Shared fixtures for the stipple pipeline tests."""

import numpy as np
import pytest
from PIL import Image

from models import StippleParams


@pytest.fixture
def solid_image():
    """Factory for a uniformly colored RGB image."""

    def _make(width: int, height: int, color=(0, 0, 0)) -> Image.Image:
        return Image.new("RGB", (width, height), color)

    return _make


@pytest.fixture
def gradient_image() -> Image.Image:
    """120x80 horizontal gradient from black (left) to white (right)."""
    ramp = np.linspace(0, 255, 120).astype(np.uint8)
    gray = np.tile(ramp, (80, 1))
    return Image.fromarray(np.stack([gray, gray, gray], axis=-1))


@pytest.fixture
def params() -> StippleParams:
    """Default parameters with no jitter and no threshold floor."""
    return StippleParams(threshold=0, randomness=0.0)
