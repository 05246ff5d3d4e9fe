"""
Card components for the home view.

Each builder turns one data record into a flet control.
"""

from typing import Callable, List, Optional

import flet as ft

from ..models import Country, FoodItem, Hospital, PhraseEntry, Place, StatisticEntry
from ..utils import format_percentage, format_rating, truncate


# =============================================================================
# DESIGN TOKENS
# =============================================================================
class DesignTokens:
    """Centralized design tokens for consistent styling."""
    # Accent colors
    ACCENT_PRIMARY = "#4F7CFF"
    ACCENT_SUCCESS = "#10B981"
    ACCENT_DANGER = "#E57373"
    ACCENT_INFO = "#60A5FA"

    # Dark surfaces
    DARK_BG = "#121212"
    DARK_SURFACE = "#1A1A1B"
    DARK_CARD = "#242426"

    # Light surfaces
    LIGHT_BG = "#F1F5F9"
    LIGHT_SURFACE = "#FFFFFF"
    LIGHT_CARD = "#FFFFFF"

    # Spacing
    SPACING_XS = 4
    SPACING_SM = 8
    SPACING_MD = 16
    SPACING_LG = 24

    # Border radius
    RADIUS_SM = 8
    RADIUS_MD = 12
    RADIUS_LG = 16

    CARD_WIDTH = 320

    @classmethod
    def card_bg(cls, dark: bool) -> str:
        return cls.DARK_CARD if dark else cls.LIGHT_CARD

    @classmethod
    def surface_bg(cls, dark: bool) -> str:
        return cls.DARK_SURFACE if dark else cls.LIGHT_SURFACE

    @classmethod
    def page_bg(cls, dark: bool) -> str:
        return cls.DARK_BG if dark else cls.LIGHT_BG


def badge(text: str, color: str = DesignTokens.ACCENT_PRIMARY, filled: bool = True) -> ft.Container:
    """Small rounded label."""
    return ft.Container(
        content=ft.Text(text, size=11, weight=ft.FontWeight.W_600,
                        color=ft.Colors.WHITE if filled else color),
        padding=ft.Padding.symmetric(horizontal=8, vertical=3),
        border_radius=DesignTokens.RADIUS_SM,
        bgcolor=color if filled else None,
        border=None if filled else ft.Border.all(1, color),
    )


def _card(content: ft.Control, dark: bool, width: Optional[int] = DesignTokens.CARD_WIDTH) -> ft.Container:
    return ft.Container(
        content=content,
        width=width,
        padding=DesignTokens.SPACING_MD,
        border_radius=DesignTokens.RADIUS_MD,
        bgcolor=DesignTokens.card_bg(dark),
        shadow=ft.BoxShadow(
            spread_radius=-2,
            blur_radius=15,
            color=ft.Colors.with_opacity(0.1, ft.Colors.BLACK),
            offset=ft.Offset(0, 4),
        ),
    )


def _labelled(label: str, value: ft.Control) -> ft.Column:
    return ft.Column(
        controls=[ft.Text(label, size=12, weight=ft.FontWeight.W_600, opacity=0.7), value],
        spacing=2,
    )


def _chips(items: List[str], color: str, filled: bool) -> ft.Row:
    return ft.Row(controls=[badge(item, color, filled) for item in items], wrap=True, spacing=6, run_spacing=6)


# =============================================================================
# CARDS
# =============================================================================

def statistic_card(stat: StatisticEntry, dark: bool) -> ft.Container:
    return _card(
        ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Icon(ft.Icons.TRENDING_UP, color=DesignTokens.ACCENT_PRIMARY, size=28),
                        badge(format_percentage(stat.percentage)),
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
                ft.Text(stat.title, size=14, weight=ft.FontWeight.BOLD),
                ft.Text(stat.description, size=12, opacity=0.7),
            ],
            spacing=8,
        ),
        dark,
        width=240,
    )


def country_header(country: Country) -> ft.Row:
    return ft.Row(
        controls=[
            ft.Text(country.flag_emoji, size=40),
            ft.Column(
                controls=[
                    ft.Text(country.name, size=28, weight=ft.FontWeight.BOLD),
                    ft.Text(
                        f"Paytaxt: {country.capital} • Dil: {country.language} • Valyuta: {country.currency}",
                        size=13,
                        opacity=0.7,
                    ),
                ],
                spacing=4,
            ),
        ],
        spacing=DesignTokens.SPACING_MD,
    )


def place_card(place: Place, dark: bool) -> ft.Container:
    return _card(
        ft.Column(
            controls=[
                ft.Stack(
                    controls=[
                        ft.Image(src=place.image_url, height=160, width=DesignTokens.CARD_WIDTH,
                                 border_radius=DesignTokens.RADIUS_SM),
                        ft.Container(
                            content=badge(f"★ {format_rating(place.rating)}", DesignTokens.ACCENT_SUCCESS),
                            right=8,
                            top=8,
                        ),
                    ],
                ),
                ft.Text(place.name, size=16, weight=ft.FontWeight.BOLD),
                ft.Text(truncate(place.description), size=12, opacity=0.75),
                ft.Row(
                    controls=[
                        badge(place.city, DesignTokens.ACCENT_PRIMARY, filled=False),
                        badge(place.category, DesignTokens.ACCENT_INFO),
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
            ],
            spacing=8,
        ),
        dark,
    )


def food_card(item: FoodItem, dark: bool) -> ft.Container:
    return _card(
        ft.Column(
            controls=[
                ft.Image(src=item.image_url, height=140, width=DesignTokens.CARD_WIDTH,
                         border_radius=DesignTokens.RADIUS_SM),
                ft.Text(item.name, size=16, weight=ft.FontWeight.BOLD),
                ft.Text(truncate(item.description), size=12, opacity=0.75),
                _chips(item.ingredients, DesignTokens.ACCENT_PRIMARY, filled=False),
                badge(item.average_price, DesignTokens.ACCENT_SUCCESS),
            ],
            spacing=8,
        ),
        dark,
    )


def hospital_card(hospital: Hospital, dark: bool) -> ft.Container:
    return _card(
        ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Icon(ft.Icons.LOCAL_HOSPITAL, color=ft.Colors.RED_400, size=20),
                        ft.Text(hospital.name, size=16, weight=ft.FontWeight.BOLD, expand=True),
                    ],
                ),
                _labelled("Ünvan:", ft.Text(hospital.address, size=13)),
                _labelled("Telefon:", ft.Text(hospital.phone, size=13, selectable=True)),
                _labelled("Təcili:", badge(hospital.emergency_phone, ft.Colors.RED_400)),
                _labelled("Xidmətlər:", _chips(hospital.services, DesignTokens.ACCENT_INFO, filled=False)),
            ],
            spacing=10,
        ),
        dark,
        width=420,
    )


def phrase_card(
    phrase: PhraseEntry,
    dark: bool,
    speaking: bool,
    on_speak: Callable[[PhraseEntry], None],
) -> ft.Container:
    """Phrase card with a speak button; the icon shows whether it is being spoken."""
    return _card(
        ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Text(phrase.azerbaijani, size=14, weight=ft.FontWeight.W_500, expand=True),
                        badge(phrase.category, DesignTokens.ACCENT_INFO, filled=False),
                    ],
                ),
                ft.Row(
                    controls=[
                        ft.Column(
                            controls=[
                                ft.Text(phrase.local_language, size=18, weight=ft.FontWeight.BOLD,
                                        color=DesignTokens.ACCENT_PRIMARY),
                                ft.Text(f"/{phrase.pronunciation}/", size=12, italic=True, opacity=0.7),
                            ],
                            spacing=2,
                            expand=True,
                        ),
                        ft.IconButton(
                            icon=ft.Icons.VOLUME_OFF if speaking else ft.Icons.VOLUME_UP,
                            icon_color=DesignTokens.ACCENT_PRIMARY,
                            tooltip="Dinlə",
                            on_click=lambda e: on_speak(phrase),
                        ),
                    ],
                ),
            ],
            spacing=10,
        ),
        dark,
        width=420,
    )
