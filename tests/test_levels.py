"""Test the levels adjustment and input validation helpers.

Tests for image_processing.utils:
    - default levels leave brightness unchanged
    - blacks/highlights clip and stretch the tonal range
    - mids remaps midtones monotonically
    - degenerate parameters raise DegenerateLevels
    - array input is processed elementwise

Run:
    pytest tests/test_levels.py -v
"""

import math

import numpy as np
import pytest

from image_processing import DegenerateLevels, StippleError, apply_levels
from image_processing.utils import validate_levels, validate_params
from models import StippleParams


@pytest.mark.parametrize("value", [0, 1, 64, 127.5, 200, 255])
def test_default_levels_identity(value):
    assert apply_levels(value) == pytest.approx(value)


def test_blacks_clip_to_zero():
    # Anything at or below the black point maps to black
    assert apply_levels(100, blacks=0.5) == 0.0
    assert apply_levels(255 * 0.5, blacks=0.5) == 0.0


def test_highlights_clip_to_white():
    assert apply_levels(200, highlights=0.5) == pytest.approx(255.0)


def test_clip_range_is_stretched():
    # Halfway between blacks and highlights lands at mid-gray
    result = apply_levels(255 * 0.5, blacks=0.25, highlights=0.75)
    assert result == pytest.approx(127.5)


def test_mids_gamma_known_value():
    # mids=0.25 gives gamma 0.5, i.e. a square root curve
    result = apply_levels(255 * 0.25, mids=0.25)
    assert result == pytest.approx(255 * 0.5)


def test_mids_monotonic_for_fixed_input():
    """Raising mids never brightens a fixed input (gamma grows with mids)."""
    mids_values = np.linspace(0.05, 0.95, 19)
    for value in (140, 180, 230):
        results = [apply_levels(value, mids=m) for m in mids_values]
        assert all(a >= b for a, b in zip(results, results[1:]))


def test_endpoints_fixed_under_gamma():
    for mids in (0.1, 0.5, 0.9):
        assert apply_levels(0, mids=mids) == 0.0
        assert apply_levels(255, mids=mids) == pytest.approx(255.0)


def test_inverted_range_is_allowed():
    # blacks above highlights is not rejected, the curve simply flips
    result = apply_levels(0, blacks=0.8, highlights=0.2)
    assert math.isfinite(result)
    assert result == pytest.approx(255.0)


def test_array_input():
    values = np.array([[0.0, 127.5], [255.0, 63.75]])
    result = apply_levels(values)
    assert isinstance(result, np.ndarray)
    assert result.shape == (2, 2)
    np.testing.assert_allclose(result, values)


@pytest.mark.parametrize(
    "blacks, mids, highlights",
    [
        (0.0, 0.0, 1.0),
        (0.0, 1.0, 1.0),
        (0.0, -0.2, 1.0),
        (0.0, 1.5, 1.0),
        (0.4, 0.5, 0.4),
    ],
)
def test_degenerate_levels_rejected(blacks, mids, highlights):
    with pytest.raises(DegenerateLevels):
        apply_levels(128, blacks=blacks, mids=mids, highlights=highlights)
    with pytest.raises(DegenerateLevels):
        validate_levels(blacks, mids, highlights)


def test_degenerate_levels_is_value_error():
    with pytest.raises(ValueError):
        validate_params(StippleParams(mids=1.0))
    assert issubclass(DegenerateLevels, StippleError)


def test_params_validate_density():
    with pytest.raises(ValueError):
        validate_params(StippleParams(density=0))
    validate_params(StippleParams())
