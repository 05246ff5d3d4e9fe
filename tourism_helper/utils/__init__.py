"""Utils module."""

from .helpers import (
    group_phrases_by_category,
    phrase_speech_text,
    format_rating,
    format_percentage,
    truncate,
)
from .logger import setup_logger

__all__ = [
    'group_phrases_by_category',
    'phrase_speech_text',
    'format_rating',
    'format_percentage',
    'truncate',
    'setup_logger',
]
