"""UI components for Turizm Helper."""

from .home import HomeView, TABS
from .audio_player import FletAudioPlayer
from .components import DesignTokens

__all__ = [
    'HomeView',
    'TABS',
    'FletAudioPlayer',
    'DesignTokens',
]
