"""Shared fixtures and in-memory fakes."""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

import pytest

from tourism_helper.errors import ApiResponseError, ApiTransportError
from tourism_helper.models import Country, FoodItem, Hospital, PhraseEntry, Place, StatisticEntry
from tourism_helper.speech import SpeechService
from tourism_helper.state import AppContext


def make_country_data(code: str) -> Dict[Tuple[str, Optional[str]], List[Any]]:
    """One record of each scoped resource, tagged with the country code."""
    return {
        ("places", code): [Place(id=f"{code}-p1", name=f"{code} Place", city=f"{code} City", category="tarixi")],
        ("food", code): [FoodItem(id=f"{code}-f1", name=f"{code} Dish", ingredients=["un", "su"])],
        ("hospitals", code): [Hospital(id=f"{code}-h1", name=f"{code} Hospital", services=["Təcili"])],
        ("language", code): [
            PhraseEntry(id=f"{code}-l1", category="salamlaşma", azerbaijani="Salam", local_language=f"{code} hello"),
        ],
    }


class FakeApiClient:
    """
    Stand-in for TourismApiClient.

    Responses come from ``data`` keyed by (resource, code). A request can be
    held back with hold() and made to fail with ``failures``.
    """

    def __init__(self, data: Optional[Dict] = None, failures=()) -> None:
        self.data: Dict[Tuple[str, Optional[str]], List[Any]] = dict(data or {})
        self.failures = set(failures)
        self.gates: Dict[Any, asyncio.Event] = {}
        self.calls: List[Tuple[str, Optional[str]]] = []
        self.closed = False

    def hold(self, key) -> asyncio.Event:
        """Block requests for a code, or for a (resource, code) pair, until the event is set."""
        gate = asyncio.Event()
        self.gates[key] = gate
        return gate

    async def _get(self, resource: str, code: Optional[str] = None) -> List[Any]:
        self.calls.append((resource, code))
        gate = self.gates.get((resource, code)) or self.gates.get(code)
        if gate is not None:
            await gate.wait()
        if (resource, code) in self.failures:
            if resource == "food":
                raise ApiTransportError("connection refused")
            raise ApiResponseError(500, f"/api/{resource}/{code}")
        return list(self.data.get((resource, code), []))

    async def get_countries(self):
        return await self._get("countries")

    async def get_statistics(self):
        return await self._get("statistics")

    async def get_places(self, code):
        return await self._get("places", code)

    async def get_food(self, code):
        return await self._get("food", code)

    async def get_hospitals(self, code):
        return await self._get("hospitals", code)

    async def get_phrases(self, code):
        return await self._get("language", code)

    async def close(self):
        self.closed = True


class FakeSpeechService(SpeechService):
    """Records requests; the test drives the callbacks by hand."""

    def __init__(self, available: bool = True) -> None:
        self._available = available
        self.requests: List[Dict[str, Any]] = []
        self.cancel_count = 0

    @property
    def available(self) -> bool:
        return self._available

    def cancel_all(self) -> None:
        self.cancel_count += 1
        for request in self.requests:
            request["cancelled"] = True

    def speak(self, text, locale, rate, pitch, on_start, on_end, on_error) -> None:
        self.requests.append({
            "text": text,
            "locale": locale,
            "rate": rate,
            "pitch": pitch,
            "on_start": on_start,
            "on_end": on_end,
            "on_error": on_error,
            "cancelled": False,
        })

    @property
    def last(self) -> Dict[str, Any]:
        return self.requests[-1]


@pytest.fixture
def context() -> AppContext:
    return AppContext()


@pytest.fixture
def countries() -> List[Country]:
    return [
        Country(code="TR", name="Türkiyə", flag_emoji="🇹🇷", capital="Ankara", language="Türk", currency="TRY"),
        Country(code="GE", name="Gürcüstan", flag_emoji="🇬🇪", capital="Tbilisi", language="Gürcü", currency="GEL"),
    ]


@pytest.fixture
def statistics() -> List[StatisticEntry]:
    return [StatisticEntry(id="s1", title="Türkiyəyə səfər", description="İllik", percentage=42.5)]


@pytest.fixture
def api(countries, statistics) -> FakeApiClient:
    data = {("countries", None): countries, ("statistics", None): statistics}
    data.update(make_country_data("TR"))
    data.update(make_country_data("GE"))
    return FakeApiClient(data)


@pytest.fixture
def speech() -> FakeSpeechService:
    return FakeSpeechService()
