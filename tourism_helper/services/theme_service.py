"""Theme preference persisted through the settings store."""

import logging

from ..config import Config, SettingsManager

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")


class ThemePreference:
    """Light/dark theme switch, written to settings on every toggle."""

    def __init__(self, settings: SettingsManager, key: str = Config.THEME_KEY) -> None:
        self._settings = settings
        self._key = key
        self._theme = self._read()

    def _read(self) -> str:
        value = self._settings.get(self._key, Config.DEFAULT_THEME)
        if value not in THEMES:
            logger.warning("Unknown theme %r in settings, using %s", value, Config.DEFAULT_THEME)
            return Config.DEFAULT_THEME
        return value

    @property
    def theme(self) -> str:
        return self._theme

    @property
    def is_dark(self) -> bool:
        return self._theme == "dark"

    def toggle(self) -> str:
        """Switch between light and dark and persist the result."""
        self._theme = "dark" if self._theme == "light" else "light"
        self._settings.set(self._key, self._theme)
        return self._theme
