"""Speech service interfaces."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

# Callbacks of a single utterance
StartCallback = Callable[[], None]
EndCallback = Callable[[], None]
ErrorCallback = Callable[[Optional[BaseException]], None]


class SpeechService(ABC):
    """
    Abstract speech synthesis service.

    At most one utterance plays at a time. A cancelled utterance
    fires none of its callbacks after cancel_all() returns.
    """

    @property
    def available(self) -> bool:
        """Whether the service can play anything at all."""
        return True

    @abstractmethod
    def cancel_all(self) -> None:
        """Stop the current utterance, if any. Must not block."""
        pass

    @abstractmethod
    def speak(
        self,
        text: str,
        locale: str,
        rate: float,
        pitch: float,
        on_start: StartCallback,
        on_end: EndCallback,
        on_error: ErrorCallback,
    ) -> None:
        """
        Start speaking text without waiting for it to finish.

        Args:
            text: Text to pronounce
            locale: Speech locale, e.g. "tr-TR"
            rate: Speaking rate relative to normal (1.0)
            pitch: Pitch relative to normal (1.0)
            on_start: Called once audio starts playing
            on_end: Called once playback finished normally
            on_error: Called once if synthesis or playback failed

        Raises:
            SpeechError: If the request could not even be scheduled
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the service."""
        self.cancel_all()

    async def __aenter__(self) -> "SpeechService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class AudioPlayer(ABC):
    """Plays a synthesized audio file."""

    @abstractmethod
    async def play(self, path: str) -> None:
        """Play the file and return when playback completed."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop playback immediately."""
        pass
