"""Configuration persistence manager for the Stipple Studio application.

This module handles loading and saving of application preferences to/from
JSON files. Only preferences are stored, never the image or its dots.
"""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, AppSettings, StippleParams


class ConfigManager:
    """Handles loading and saving of application settings."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file
                (defaults to ~/.stipple_studio_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> AppSettings:
        """Load settings from file, returning defaults if not found.

        Returns:
            AppSettings with loaded or default values
        """
        settings = AppSettings()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                # Update settings with loaded values (fallback to defaults)
                settings.max_width = data.get("max_width", settings.max_width)
                settings.max_height = data.get("max_height", settings.max_height)
                settings.export_filename = data.get(
                    "export_filename", settings.export_filename
                )
                settings.seed = data.get("seed", settings.seed)
                settings.params = self._load_params(data.get("params", {}))
                print(f"✓ Loaded configuration from {self.config_path}")
        except Exception as e:
            print(f"Warning: Could not load config file: {e}")
            settings = AppSettings()

        return settings

    @staticmethod
    def _load_params(data: dict) -> StippleParams:
        """Build StippleParams from a dict, ignoring unknown keys."""
        params = StippleParams()
        for param_field in fields(StippleParams):
            if param_field.name in data:
                setattr(params, param_field.name, data[param_field.name])
        return params

    def save(self, settings: AppSettings) -> Tuple[bool, Optional[str]]:
        """Save settings to file.

        Args:
            settings: AppSettings to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(settings), f, indent=2)
            return True, None
        except Exception as e:
            return False, str(e)
