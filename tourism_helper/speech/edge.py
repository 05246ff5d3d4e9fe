"""Edge TTS speech service - neural voices via Microsoft Edge's online TTS."""

import asyncio
import logging
import os
import uuid
from typing import Optional

import edge_tts

from ..config import Config, resolve_voice
from ..errors import SpeechError
from .base import AudioPlayer, EndCallback, ErrorCallback, SpeechService, StartCallback

logger = logging.getLogger(__name__)

# Reference pitch used to express a relative pitch as an Edge TTS Hz offset
_BASE_PITCH_HZ = 200


def format_rate(rate: float) -> str:
    """Convert a relative rate (1.0 = normal) to Edge TTS syntax, e.g. 0.8 -> "-20%"."""
    return f"{round((rate - 1.0) * 100):+d}%"


def format_pitch(pitch: float) -> str:
    """Convert a relative pitch (1.0 = normal) to Edge TTS syntax, e.g. 1.0 -> "+0Hz"."""
    return f"{round((pitch - 1.0) * _BASE_PITCH_HZ):+d}Hz"


class EdgeSpeechService(SpeechService):
    """Synthesize with Edge TTS and hand the mp3 to an audio player."""

    def __init__(self, player: Optional[AudioPlayer], media_dir: Optional[str] = None):
        """
        Initialize speech service.

        Args:
            player: Audio player used for playback; None makes the service unavailable
            media_dir: Directory for temporary mp3 files (defaults to Config.MEDIA_DIR)
        """
        self._player = player
        self.media_dir = media_dir or Config.MEDIA_DIR
        self._task: Optional[asyncio.Task] = None

    @property
    def available(self) -> bool:
        return self._player is not None

    def cancel_all(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
        if self._player is not None:
            self._player.stop()

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
        if not self.available:
            raise SpeechError("No audio player configured")
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise SpeechError("speak() needs a running event loop") from e

        self._task = loop.create_task(
            self._run(text, locale, rate, pitch, on_start, on_end, on_error)
        )

    async def synthesize(self, text: str, locale: str, rate: float, pitch: float) -> str:
        """
        Generate an mp3 for text.

        Uses atomic write pattern: write to temp file, then rename.

        Returns:
            Path of the written file

        Raises:
            SpeechError: If Edge TTS produced no audio
        """
        os.makedirs(self.media_dir, exist_ok=True)
        token = uuid.uuid4().hex[:12]
        output_path = os.path.join(self.media_dir, f"_say_{token}.mp3")
        temp_path = f"{output_path}.tmp"

        communicate = edge_tts.Communicate(
            text,
            resolve_voice(locale),
            rate=format_rate(rate),
            pitch=format_pitch(pitch),
        )
        try:
            await communicate.save(temp_path)
            if not os.path.exists(temp_path) or os.path.getsize(temp_path) == 0:
                raise SpeechError(f"Edge TTS returned no audio for {locale}")
            os.replace(temp_path, output_path)
        finally:
            if os.path.exists(temp_path):
                os.remove(temp_path)
        return output_path

    async def _run(
        self,
        text: str,
        locale: str,
        rate: float,
        pitch: float,
        on_start: StartCallback,
        on_end: EndCallback,
        on_error: ErrorCallback,
    ) -> None:
        path: Optional[str] = None
        try:
            path = await self.synthesize(text, locale, rate, pitch)
            on_start()
            await self._player.play(path)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning("Speech failed (%s): %s", locale, e)
            on_error(e)
            return
        finally:
            if path and os.path.exists(path):
                os.remove(path)
        on_end()
