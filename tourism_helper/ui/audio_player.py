"""Flet audio player used by the speech service."""

import asyncio
import logging
import os
from typing import Optional

import flet as ft
import flet_audio as fta

from ..errors import SpeechError
from ..speech import AudioPlayer

logger = logging.getLogger(__name__)


class FletAudioPlayer(AudioPlayer):
    """Play files through the flet-audio service and wait for completion."""

    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self._audio: Optional[fta.Audio] = None
        self._done: Optional[asyncio.Future] = None

    async def play(self, path: str) -> None:
        self.stop()

        done = asyncio.get_running_loop().create_future()
        self._done = done
        self._audio = fta.Audio(
            src=os.path.abspath(path),
            autoplay=True,
            volume=1.0,
            on_state_change=lambda e: self._on_state_change(e, done),
        )
        self.page.services.append(self._audio)
        self.page.update()

        await done

    def _on_state_change(self, e, done: asyncio.Future) -> None:
        if done.done():
            return
        if e.state == fta.AudioState.COMPLETED:
            done.set_result(None)
        elif e.state in (fta.AudioState.STOPPED, fta.AudioState.DISPOSED):
            done.set_exception(SpeechError(f"Playback stopped ({e.state})"))

    def stop(self) -> None:
        done, self._done = self._done, None
        if done is not None and not done.done():
            done.cancel()

        audio, self._audio = self._audio, None
        if audio is not None:
            try:
                if audio in self.page.services:
                    self.page.services.remove(audio)
                self.page.update()
            except RuntimeError as e:
                # Page already closed
                logger.debug("Could not detach audio player: %s", e)
