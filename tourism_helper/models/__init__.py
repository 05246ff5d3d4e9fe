"""Data models for Turizm Helper."""

from .entities import Country, StatisticEntry, Place, FoodItem, Hospital, PhraseEntry

__all__ = [
    'Country',
    'StatisticEntry',
    'Place',
    'FoodItem',
    'Hospital',
    'PhraseEntry',
]
