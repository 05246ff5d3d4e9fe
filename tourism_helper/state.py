"""Application state shared by the controllers and the view."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .models import Country, FoodItem, Hospital, PhraseEntry, Place, StatisticEntry

logger = logging.getLogger(__name__)

# Listener signature: callback(topic) where topic is "load" or "speech"
StateListener = Callable[[str], None]


@dataclass
class LoadState:
    """Fetched data. Written only by DataLoadController."""

    selected_country_code: str = ""
    is_loading: bool = False

    countries: List[Country] = field(default_factory=list)
    statistics: List[StatisticEntry] = field(default_factory=list)

    # Country-scoped, replaced per successful batch
    places: List[Place] = field(default_factory=list)
    food: List[FoodItem] = field(default_factory=list)
    hospitals: List[Hospital] = field(default_factory=list)
    phrases: List[PhraseEntry] = field(default_factory=list)


@dataclass
class SpeechState:
    """Pronunciation playback. Written only by PronunciationController."""

    speaking_text: Optional[str] = None
    audio_enabled: bool = True


class AppContext:
    """
    Composition root holding the state both controllers share.

    The controllers receive the same context by reference; the view
    subscribes to change notifications and re-renders from it.
    """

    def __init__(self) -> None:
        self.load = LoadState()
        self.speech = SpeechState()
        self._listeners: List[StateListener] = []

    @property
    def selected_country_code(self) -> str:
        return self.load.selected_country_code

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, topic: str) -> None:
        """Tell every listener that part of the state changed."""
        for listener in list(self._listeners):
            try:
                listener(topic)
            except Exception:
                # A broken view must not break the controllers
                logger.exception("State listener failed for topic %r", topic)
