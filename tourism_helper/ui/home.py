"""
Home View - Country Selection, Statistics and Country Tabs
----------------------------------------------------------

Renders the shared AppContext and forwards user actions to the
data-load and pronunciation controllers.
"""

import logging
from typing import Callable, Dict, List, Optional

import flet as ft

from ..config import Config
from ..models import PhraseEntry
from ..services import DataLoadController, PronunciationController, ThemePreference
from ..state import AppContext
from ..utils import group_phrases_by_category, phrase_speech_text
from .components import (
    DesignTokens,
    country_header,
    food_card,
    hospital_card,
    phrase_card,
    place_card,
    statistic_card,
)

logger = logging.getLogger(__name__)

# Tab id -> (label, icon)
TABS: Dict[str, tuple] = {
    "overview": ("Ümumi", ft.Icons.PUBLIC),
    "places": ("Yerlər", ft.Icons.PLACE),
    "food": ("Yeməklər", ft.Icons.RESTAURANT),
    "hospitals": ("Xəstəxanalar", ft.Icons.LOCAL_HOSPITAL),
    "language": ("Dil", ft.Icons.CHAT),
}


class HomeView:
    """
    Single-page view: header, statistics grid and tabbed country details.

    Re-renders whenever the AppContext notifies a change.
    """

    def __init__(
        self,
        page: ft.Page,
        context: AppContext,
        data: DataLoadController,
        pronunciation: PronunciationController,
        theme: ThemePreference,
    ) -> None:
        self.page = page
        self.context = context
        self.data = data
        self.pronunciation = pronunciation
        self.theme = theme

        self.active_tab: str = "overview"

        # UI References
        self._country_buttons: Optional[ft.Row] = None
        self._stats_grid: Optional[ft.Row] = None
        self._country_section: Optional[ft.Container] = None
        self._tab_bar: Optional[ft.Row] = None
        self._tab_content: Optional[ft.Container] = None
        self._theme_button: Optional[ft.IconButton] = None
        self._audio_button: Optional[ft.IconButton] = None
        self._loading_ring: Optional[ft.ProgressRing] = None

        self._container = self._build_view()
        self._unsubscribe: Callable[[], None] = context.subscribe(self._on_state_change)
        self.render()

    @property
    def container(self) -> ft.Container:
        """Get the main container for this view."""
        return self._container

    @property
    def dark(self) -> bool:
        return self.theme.is_dark

    def dispose(self) -> None:
        self._unsubscribe()

    # =========================================================================
    # LAYOUT
    # =========================================================================

    def _build_view(self) -> ft.Container:
        self._stats_grid = ft.Row(wrap=True, spacing=DesignTokens.SPACING_LG, run_spacing=DesignTokens.SPACING_LG)
        self._tab_bar = ft.Row(wrap=True, spacing=DesignTokens.SPACING_SM)
        self._tab_content = ft.Container()
        self._loading_ring = ft.ProgressRing(width=24, height=24, stroke_width=3, visible=False)
        self._country_section = ft.Container(
            padding=DesignTokens.SPACING_LG,
            border_radius=DesignTokens.RADIUS_LG,
            visible=False,
        )

        main_content = ft.Column(
            controls=[
                self._build_header(),
                ft.Text("Azərbaycan Turistlərinin Statistikası", size=22, weight=ft.FontWeight.BOLD,
                        text_align=ft.TextAlign.CENTER),
                self._stats_grid,
                ft.Container(height=DesignTokens.SPACING_MD),
                self._country_section,
            ],
            spacing=DesignTokens.SPACING_MD,
            scroll=ft.ScrollMode.AUTO,
            expand=True,
        )

        return ft.Container(content=main_content, expand=True, padding=DesignTokens.SPACING_LG)

    def _build_header(self) -> ft.Container:
        """Title on the left, theme/audio toggles and country buttons on the right."""
        self._theme_button = ft.IconButton(on_click=self._on_theme_click, tooltip="Tema")
        self._audio_button = ft.IconButton(on_click=self._on_audio_click, tooltip="Səs")
        self._country_buttons = ft.Row(spacing=DesignTokens.SPACING_SM, wrap=True)

        return ft.Container(
            content=ft.Row(
                controls=[
                    ft.Row(
                        controls=[
                            ft.Icon(ft.Icons.PUBLIC, color=DesignTokens.ACCENT_PRIMARY, size=28),
                            ft.Text(Config.APP_TITLE, size=24, weight=ft.FontWeight.BOLD),
                        ],
                        spacing=10,
                    ),
                    ft.Row(
                        controls=[
                            self._loading_ring,
                            self._theme_button,
                            self._audio_button,
                            ft.Text("Ölkə:", size=13, opacity=0.7),
                            self._country_buttons,
                        ],
                        spacing=DesignTokens.SPACING_SM,
                    ),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                wrap=True,
            ),
            padding=ft.Padding.only(bottom=DesignTokens.SPACING_SM),
        )

    # =========================================================================
    # RENDERING
    # =========================================================================

    def render(self) -> None:
        """Rebuild every dynamic section from the current state."""
        load = self.context.load

        self.page.theme_mode = ft.ThemeMode.DARK if self.dark else ft.ThemeMode.LIGHT
        self.page.bgcolor = DesignTokens.page_bg(self.dark)
        self._theme_button.icon = ft.Icons.LIGHT_MODE if self.dark else ft.Icons.DARK_MODE
        self._audio_button.icon = (
            ft.Icons.VOLUME_UP if self.context.speech.audio_enabled else ft.Icons.VOLUME_OFF
        )
        self._loading_ring.visible = load.is_loading

        self._country_buttons.controls = [
            self._country_button(country.code, f"{country.flag_emoji} {country.name}")
            for country in load.countries
        ]
        self._stats_grid.controls = [statistic_card(stat, self.dark) for stat in load.statistics]
        self._render_country_section()

    def _country_button(self, code: str, label: str) -> ft.Container:
        selected = code == self.context.selected_country_code
        return ft.Container(
            content=ft.Text(label, size=13, weight=ft.FontWeight.W_600,
                            color=ft.Colors.WHITE if selected else None),
            padding=ft.Padding.symmetric(horizontal=12, vertical=6),
            border_radius=DesignTokens.RADIUS_SM,
            bgcolor=DesignTokens.ACCENT_PRIMARY if selected else None,
            border=None if selected else ft.Border.all(1, DesignTokens.ACCENT_PRIMARY),
            on_click=lambda e: self._on_country_click(code),
        )

    def _render_country_section(self) -> None:
        country = self.data.selected_country()
        self._country_section.visible = country is not None
        if country is None:
            return

        self._country_section.bgcolor = DesignTokens.surface_bg(self.dark)
        self._tab_bar.controls = [self._tab_button(tab_id) for tab_id in TABS]
        self._tab_content.content = self._build_tab_content(self.active_tab)
        self._country_section.content = ft.Column(
            controls=[country_header(country), self._tab_bar, self._tab_content],
            spacing=DesignTokens.SPACING_MD,
        )

    def _tab_button(self, tab_id: str) -> ft.Container:
        label, icon = TABS[tab_id]
        active = tab_id == self.active_tab
        return ft.Container(
            content=ft.Row(
                controls=[ft.Icon(icon, size=16), ft.Text(label, size=12)],
                spacing=6,
            ),
            padding=ft.Padding.symmetric(horizontal=12, vertical=8),
            border_radius=DesignTokens.RADIUS_SM,
            bgcolor=ft.Colors.with_opacity(0.15, DesignTokens.ACCENT_PRIMARY) if active else None,
            on_click=lambda e: self._on_tab_click(tab_id),
        )

    def _build_tab_content(self, tab_id: str) -> ft.Control:
        load = self.context.load
        if tab_id == "places":
            return self._grid([place_card(place, self.dark) for place in load.places])
        if tab_id == "food":
            return self._grid([food_card(item, self.dark) for item in load.food])
        if tab_id == "hospitals":
            return self._grid([hospital_card(hospital, self.dark) for hospital in load.hospitals])
        if tab_id == "language":
            return self._build_language_tab(load.phrases)
        return self._build_overview_tab()

    def _build_overview_tab(self) -> ft.Control:
        country = self.data.selected_country()
        return ft.Column(
            controls=[
                ft.Text(f"{country.name} haqqında ümumi məlumat", size=20, weight=ft.FontWeight.BOLD),
                ft.Text(
                    f"Bu səhifədə {country.name} ölkəsi haqqında səyahət üçün lazım olan "
                    "bütün məlumatları tapa bilərsiniz.",
                    size=14,
                    opacity=0.8,
                ),
            ],
            spacing=DesignTokens.SPACING_SM,
        )

    def _build_language_tab(self, phrases: List[PhraseEntry]) -> ft.Control:
        sections: List[ft.Control] = []
        for category, entries in group_phrases_by_category(phrases).items():
            sections.append(ft.Text(category.capitalize(), size=18, weight=ft.FontWeight.BOLD))
            sections.append(self._grid([
                phrase_card(
                    phrase,
                    self.dark,
                    speaking=self.pronunciation.is_speaking(phrase_speech_text(phrase)),
                    on_speak=self._on_speak,
                )
                for phrase in entries
            ]))
        return ft.Column(controls=sections, spacing=DesignTokens.SPACING_MD)

    @staticmethod
    def _grid(cards: List[ft.Control]) -> ft.Control:
        if not cards:
            return ft.Text("Məlumat yoxdur", size=13, opacity=0.6)
        return ft.Row(controls=cards, wrap=True, spacing=DesignTokens.SPACING_LG,
                      run_spacing=DesignTokens.SPACING_LG)

    def _refresh(self) -> None:
        self.render()
        self.page.update()

    # =========================================================================
    # EVENT HANDLERS
    # =========================================================================

    def _on_state_change(self, topic: str) -> None:
        self._refresh()

    def _on_country_click(self, code: str) -> None:
        self.page.run_task(self._select_country, code)

    async def _select_country(self, code: str) -> None:
        self.data.select_country(code)

    def _on_tab_click(self, tab_id: str) -> None:
        if tab_id == self.active_tab:
            return
        self.active_tab = tab_id
        self._refresh()

    def _on_theme_click(self, e: ft.ControlEvent) -> None:
        logger.info("Theme switched to %s", self.theme.toggle())
        self._refresh()

    def _on_audio_click(self, e: ft.ControlEvent) -> None:
        self.pronunciation.toggle_audio()

    def _on_speak(self, phrase: PhraseEntry) -> None:
        self.page.run_task(self._speak, phrase_speech_text(phrase))

    async def _speak(self, text: str) -> None:
        self.pronunciation.speak(text)
