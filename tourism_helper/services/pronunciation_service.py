"""
Pronunciation Service - Speak phrases in the selected country's language.

Tracks which phrase is being spoken so the view can mark it.
"""

import logging
from enum import Enum
from typing import Optional

from ..config import Config, resolve_locale
from ..errors import SpeechError
from ..speech import SpeechService
from ..state import AppContext

logger = logging.getLogger(__name__)


class UtterancePhase(Enum):
    """Lifecycle of the newest utterance request."""
    IDLE = "idle"
    REQUESTED = "requested"
    SPEAKING = "speaking"


class PronunciationController:
    """
    Cancel-then-speak playback with "currently speaking" tracking.

    Only the newest request is tracked: callbacks that arrive for an
    older, preempted utterance are ignored.
    """

    def __init__(
        self,
        context: AppContext,
        speech_service: Optional[SpeechService],
        rate: float = Config.SPEECH_RATE,
        pitch: float = Config.SPEECH_PITCH,
    ) -> None:
        """
        Initialize the controller.

        Args:
            context: Shared application state (selection is read from here)
            speech_service: Speech backend, or None when the platform has none
            rate: Speaking rate relative to normal
            pitch: Pitch relative to normal
        """
        self.context = context
        self.speech_service = speech_service
        self.rate = rate
        self.pitch = pitch

        self._generation: int = 0
        self._phase: UtterancePhase = UtterancePhase.IDLE

    @property
    def state(self):
        return self.context.speech

    @property
    def phase(self) -> UtterancePhase:
        return self._phase

    @property
    def speaking_text(self) -> Optional[str]:
        return self.state.speaking_text

    def is_speaking(self, text: str) -> bool:
        """Whether text is the phrase currently being spoken."""
        return self.state.speaking_text == text

    @property
    def service_available(self) -> bool:
        return self.speech_service is not None and self.speech_service.available

    # =========================================================================
    # PLAYBACK
    # =========================================================================

    def speak(self, text: str) -> bool:
        """
        Pronounce text, preempting whatever is playing.

        The locale comes from the selection at call time.

        Returns:
            True if an utterance was requested
        """
        if not self.state.audio_enabled or not self.service_available:
            return False

        self.speech_service.cancel_all()
        self._generation += 1
        generation = self._generation
        self._phase = UtterancePhase.REQUESTED
        # The preempted utterance will never report its end
        self._set_speaking(None)

        locale = resolve_locale(self.context.selected_country_code)
        logger.debug("Speaking %r as %s", text, locale)

        def on_start() -> None:
            if generation != self._generation or self._phase is not UtterancePhase.REQUESTED:
                return
            self._phase = UtterancePhase.SPEAKING
            self._set_speaking(text)

        def on_end() -> None:
            if generation == self._generation:
                self._finish()

        def on_error(error: Optional[BaseException] = None) -> None:
            if generation != self._generation:
                return
            if error is not None:
                logger.warning("Pronunciation failed for %r: %s", text, error)
            self._finish()

        try:
            self.speech_service.speak(
                text,
                locale,
                self.rate,
                self.pitch,
                on_start,
                on_end,
                on_error,
            )
        except SpeechError as e:
            on_error(e)
        return True

    def stop(self) -> None:
        """Cancel playback and clear the speaking marker."""
        if self.speech_service is not None:
            self.speech_service.cancel_all()
        self._generation += 1
        self._finish()

    def _finish(self) -> None:
        self._phase = UtterancePhase.IDLE
        self._set_speaking(None)

    def _set_speaking(self, text: Optional[str]) -> None:
        if self.state.speaking_text == text:
            return
        self.state.speaking_text = text
        self.context.notify("speech")

    # =========================================================================
    # SETTINGS
    # =========================================================================

    def set_audio_enabled(self, enabled: bool) -> None:
        """Enable or disable pronunciation; playback in progress is left alone."""
        if self.state.audio_enabled == enabled:
            return
        self.state.audio_enabled = enabled
        self.context.notify("speech")

    def toggle_audio(self) -> bool:
        """Flip the audio switch and return the new value."""
        self.set_audio_enabled(not self.state.audio_enabled)
        return self.state.audio_enabled
