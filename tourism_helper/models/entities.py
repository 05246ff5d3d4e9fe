"""Data models for Turizm Helper."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _number(data: Dict[str, Any], key: str) -> float:
    try:
        return float(data.get(key) or 0)
    except (TypeError, ValueError):
        return 0.0


def _strings(data: Dict[str, Any], key: str) -> List[str]:
    return [str(item) for item in data.get(key) or []]


@dataclass(frozen=True)
class Country:
    """A destination country; selected by ``code``."""

    code: str
    name: str
    flag_emoji: str = ""
    capital: str = ""
    language: str = ""
    currency: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Country":
        return cls(
            code=_text(data, "code"),
            name=_text(data, "name"),
            flag_emoji=_text(data, "flag_emoji"),
            capital=_text(data, "capital"),
            language=_text(data, "language"),
            currency=_text(data, "currency"),
        )


@dataclass(frozen=True)
class StatisticEntry:
    """Aggregate tourist statistic (percentage in 0-100)."""

    id: str
    title: str
    description: str = ""
    percentage: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatisticEntry":
        return cls(
            id=_text(data, "id"),
            title=_text(data, "title"),
            description=_text(data, "description"),
            percentage=_number(data, "percentage"),
        )


@dataclass(frozen=True)
class Place:
    id: str
    name: str
    description: str = ""
    image_url: str = ""
    rating: float = 0.0
    city: str = ""
    category: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Place":
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            description=_text(data, "description"),
            image_url=_text(data, "image_url"),
            rating=_number(data, "rating"),
            city=_text(data, "city"),
            category=_text(data, "category"),
        )


@dataclass(frozen=True)
class FoodItem:
    id: str
    name: str
    description: str = ""
    image_url: str = ""
    ingredients: List[str] = field(default_factory=list)
    average_price: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FoodItem":
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            description=_text(data, "description"),
            image_url=_text(data, "image_url"),
            ingredients=_strings(data, "ingredients"),
            average_price=_text(data, "average_price"),
        )


@dataclass(frozen=True)
class Hospital:
    id: str
    name: str
    address: str = ""
    phone: str = ""
    emergency_phone: str = ""
    services: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Hospital":
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            address=_text(data, "address"),
            phone=_text(data, "phone"),
            emergency_phone=_text(data, "emergency_phone"),
            services=_strings(data, "services"),
        )


@dataclass(frozen=True)
class PhraseEntry:
    """
    A phrase in Azerbaijani with its local-language translation.

    ``local_language`` is the text handed to the speech service.
    """

    id: str
    category: str
    azerbaijani: str
    local_language: str
    pronunciation: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhraseEntry":
        return cls(
            id=_text(data, "id"),
            category=_text(data, "category"),
            azerbaijani=_text(data, "azerbaijani"),
            local_language=_text(data, "local_language"),
            pronunciation=_text(data, "pronunciation"),
        )
