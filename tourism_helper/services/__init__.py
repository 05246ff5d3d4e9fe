"""Services layer for application logic."""

from .data_service import DataLoadController, CountryBundle, SCOPED_RESOURCES
from .pronunciation_service import PronunciationController, UtterancePhase
from .theme_service import ThemePreference, THEMES

__all__ = [
    "DataLoadController",
    "CountryBundle",
    "SCOPED_RESOURCES",
    "PronunciationController",
    "UtterancePhase",
    "ThemePreference",
    "THEMES",
]
