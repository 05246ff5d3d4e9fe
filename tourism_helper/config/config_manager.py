"""Persistent settings manager with JSON storage and environment fallback."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .settings import Config

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Manages user preferences with JSON persistence.

    Settings are loaded from a JSON file with fallback to environment variables.
    Changes are immediately persisted to disk.

    Usage:
        settings = SettingsManager()
        theme = settings.get("theme", "dark")
        settings.set("theme", "light")
    """

    # Default values for all settings
    DEFAULTS: Dict[str, str] = {
        "theme": Config.DEFAULT_THEME,
    }

    # Environment overrides use an upper-case, prefixed key: TOURISM_THEME
    ENV_PREFIX: str = "TOURISM_"

    def __init__(self, settings_file: Optional[str] = None) -> None:
        """
        Initialize the settings manager.

        Args:
            settings_file: Path to the settings JSON file.
                          Defaults to Config.SETTINGS_FILE.
        """
        self._settings_file: Path = Path(settings_file or Config.SETTINGS_FILE)
        self._settings: Dict[str, Any] = {}

        self._load_settings()

    def _load_settings(self) -> None:
        """Load settings from JSON file with environment variable fallback."""
        self._settings = dict(self.DEFAULTS)

        if self._settings_file.exists():
            try:
                with open(self._settings_file, "r", encoding="utf-8") as f:
                    file_settings = json.load(f)
                if isinstance(file_settings, dict):
                    self._settings.update(file_settings)
                else:
                    logger.warning("Ignoring settings file %s: not a JSON object", self._settings_file)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning("Could not load settings file: %s", e)

        # Override with environment variables (highest priority)
        for key in self.DEFAULTS:
            env_value = os.environ.get(f"{self.ENV_PREFIX}{key.upper()}")
            if env_value is not None:
                self._settings[key] = env_value

    def _save_settings(self) -> None:
        """Save current settings to JSON file."""
        try:
            self._settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._settings_file, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, indent=2, ensure_ascii=False)
        except IOError as e:
            logger.warning("Could not save settings file: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and persist to disk."""
        self._settings[key] = value
        self._save_settings()
