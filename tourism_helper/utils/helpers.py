"""Utility functions."""

from typing import Dict, Iterable, List

from ..models import PhraseEntry


def group_phrases_by_category(phrases: Iterable[PhraseEntry]) -> Dict[str, List[PhraseEntry]]:
    """
    Group phrases by category.

    Categories keep the order in which they first appear;
    phrases keep their order within a category.
    """
    groups: Dict[str, List[PhraseEntry]] = {}
    for phrase in phrases:
        groups.setdefault(phrase.category, []).append(phrase)
    return groups


def phrase_speech_text(phrase: PhraseEntry) -> str:
    """Text pronounced for a phrase, and matched against the speaking marker."""
    return phrase.local_language


def format_rating(rating: float) -> str:
    """Format a place rating for a badge: 4.0 -> "4", 4.55 -> "4.6"."""
    return f"{rating:.1f}".rstrip("0").rstrip(".")


def format_percentage(value: float) -> str:
    """Format a statistic percentage, clamped to 0-100."""
    value = min(max(value, 0.0), 100.0)
    return f"{format_rating(value)}%"


def truncate(text: str, max_len: int = 120) -> str:
    """Shorten text for card display."""
    text = str(text).strip()
    if len(text) > max_len:
        return text[:max_len - 3] + "..."
    return text
