"""
Turizm Helper: Travel Information GUI
-------------------------------------

A Flet front-end over the tourism data provider.
"""

import logging
import traceback

import flet as ft

from tourism_helper.config import Config, SettingsManager
from tourism_helper.fetchers import TourismApiClient
from tourism_helper.services import DataLoadController, PronunciationController, ThemePreference
from tourism_helper.speech import EdgeSpeechService
from tourism_helper.state import AppContext
from tourism_helper.ui import FletAudioPlayer, HomeView
from tourism_helper.utils import setup_logger

logger = logging.getLogger("tourism_helper.app")


# =============================================================================
# MAIN APPLICATION
# =============================================================================

class TourismHelperApp:
    """Composition root: owns the shared state, the controllers and the view."""

    def __init__(self, page: ft.Page) -> None:
        """
        Initialize the application.

        Args:
            page: Flet page instance
        """
        self.page = page
        self.context = AppContext()
        self.settings = SettingsManager()
        self.theme = ThemePreference(self.settings)

        self.speech = EdgeSpeechService(FletAudioPlayer(page))
        self.data = DataLoadController(self.context, TourismApiClient())
        self.pronunciation = PronunciationController(self.context, self.speech)

        self._setup_page()
        self.home = HomeView(page, self.context, self.data, self.pronunciation, self.theme)
        page.add(self.home.container)
        page.on_close = self._on_close

    def _setup_page(self) -> None:
        """Configure page settings and theme."""
        self.page.title = Config.APP_TITLE
        self.page.theme = ft.Theme(
            color_scheme_seed="#4F7CFF",
            font_family="Inter, Roboto, Segoe UI, sans-serif",
        )
        self.page.padding = 0
        self.page.spacing = 0
        self.page.window.min_width = 900
        self.page.window.min_height = 600
        self.page.window.width = 1280
        self.page.window.height = 850

    async def start(self) -> None:
        """Load global data and the default country."""
        logger.info("Using data provider at %s", Config.API_BASE_URL)
        await self.data.start()

    async def shutdown(self) -> None:
        self.pronunciation.stop()
        self.home.dispose()
        await self.speech.close()
        await self.data.close()

    def _on_close(self, e) -> None:
        self.page.run_task(self.shutdown)


async def main(page: ft.Page) -> None:
    """
    Main entry point for Flet application.

    Args:
        page: Flet page instance
    """
    try:
        app = TourismHelperApp(page)
    except Exception:
        logger.exception("UI failed to start")
        error_text = traceback.format_exc()
        page.add(
            ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Text("UI failed to start", size=20, weight=ft.FontWeight.BOLD, color=ft.Colors.RED_400),
                        ft.Container(
                            content=ft.Text(error_text, size=11, selectable=True, color=ft.Colors.WHITE70),
                            padding=10,
                            bgcolor=ft.Colors.with_opacity(0.08, ft.Colors.WHITE),
                            border_radius=8,
                        ),
                    ],
                    spacing=10,
                ),
                padding=20,
            )
        )
        page.update()
        return

    await app.start()


def run() -> None:
    """Console script entry point."""
    setup_logger()
    ft.run(main)


if __name__ == "__main__":
    run()
