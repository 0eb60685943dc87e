"""Test loading and saving application settings.

Tests for config_manager.ConfigManager:
    - defaults when no file exists
    - save/load keeps every field
    - partial and unknown keys fall back to defaults
    - corrupt files do not raise

Run:
    pytest tests/test_config_manager.py -v
"""

import json

from config_manager import ConfigManager
from models import MAX_CANVAS_HEIGHT, MAX_CANVAS_WIDTH, AppSettings, StippleParams


def test_defaults_when_missing(tmp_path):
    settings = ConfigManager(tmp_path / "missing.json").load()

    assert settings == AppSettings()
    assert (settings.max_width, settings.max_height) == (MAX_CANVAS_WIDTH, MAX_CANVAS_HEIGHT)
    assert settings.params == StippleParams()


def test_save_then_load(tmp_path):
    manager = ConfigManager(tmp_path / "config.json")
    settings = AppSettings(
        max_width=640,
        max_height=480,
        export_filename="portrait.svg",
        seed=7,
        params=StippleParams(density=8, threshold=20, invert=True, mids=0.3),
    )

    success, error = manager.save(settings)

    assert success and error is None
    assert manager.load() == settings


def test_partial_file_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_width": 300, "params": {"dot_size": 2.0, "bogus": 1}}))

    settings = ConfigManager(path).load()

    assert settings.max_width == 300
    assert settings.max_height == MAX_CANVAS_HEIGHT
    assert settings.params.dot_size == 2.0
    assert settings.params.density == StippleParams().density
    assert not hasattr(settings.params, "bogus")


def test_corrupt_file_returns_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    assert ConfigManager(path).load() == AppSettings()


def test_save_failure_reports_error(tmp_path):
    manager = ConfigManager(tmp_path / "no-such-dir" / "config.json")
    success, error = manager.save(AppSettings())

    assert not success
    assert error
