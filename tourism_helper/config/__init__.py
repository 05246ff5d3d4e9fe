"""Configuration module for Turizm Helper."""

from .settings import Config
from .languages import LOCALES, DEFAULT_LOCALE, VOICES, resolve_locale, resolve_voice
from .config_manager import SettingsManager

__all__ = [
    'Config',
    'LOCALES',
    'DEFAULT_LOCALE',
    'VOICES',
    'resolve_locale',
    'resolve_voice',
    'SettingsManager',
]
