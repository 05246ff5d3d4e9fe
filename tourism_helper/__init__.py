"""Turizm Helper - Travel information for Azerbaijani tourists"""

__version__ = "1.0.0"
__author__ = "Turizm Helper Team"

from .config import Config, LOCALES, SettingsManager
from .errors import ApiError, ApiResponseError, ApiTransportError, SpeechError
from .state import AppContext, LoadState, SpeechState
from .services import DataLoadController, PronunciationController, ThemePreference

__all__ = [
    'Config',
    'LOCALES',
    'SettingsManager',
    'ApiError',
    'ApiResponseError',
    'ApiTransportError',
    'SpeechError',
    'AppContext',
    'LoadState',
    'SpeechState',
    'DataLoadController',
    'PronunciationController',
    'ThemePreference',
]
