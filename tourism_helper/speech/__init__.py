"""Speech module - text-to-speech playback."""

from .base import SpeechService, AudioPlayer
from .edge import EdgeSpeechService, format_rate, format_pitch

__all__ = [
    'SpeechService',
    'AudioPlayer',
    'EdgeSpeechService',
    'format_rate',
    'format_pitch',
]
