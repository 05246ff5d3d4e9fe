"""Tourism API client - read-only access to the backend data provider."""

import asyncio
import logging
import urllib.parse
from typing import Any, Callable, List, Optional, TypeVar

import aiohttp

from ..config import Config
from ..errors import ApiResponseError, ApiTransportError
from ..models import Country, FoodItem, Hospital, PhraseEntry, Place, StatisticEntry
from .base import BaseFetcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TourismApiClient(BaseFetcher):
    """Handle GET requests to the tourism provider with session pooling."""

    def __init__(self, base_url: Optional[str] = None, api_prefix: Optional[str] = None):
        """
        Initialize API client.

        Args:
            base_url: Provider root, e.g. "http://localhost:8000" (defaults to Config.API_BASE_URL)
            api_prefix: Path prefix for all resources (defaults to Config.API_PREFIX)
        """
        self.base_url = (base_url or Config.API_BASE_URL).rstrip("/")
        prefix = Config.API_PREFIX if api_prefix is None else api_prefix
        self.api_prefix = "/" + prefix.strip("/") if prefix.strip("/") else ""
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_lock = asyncio.Lock()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create a shared aiohttp session (connection pooling)."""
        async with self._session_lock:
            if self._session is None or self._session.closed:
                connector = aiohttp.TCPConnector(limit=Config.CONNECTION_LIMIT)
                # No request timeout: a slow provider just keeps the section loading
                timeout = aiohttp.ClientTimeout(total=None)
                self._session = aiohttp.ClientSession(
                    connector=connector,
                    headers={"Accept": "application/json"},
                    timeout=timeout,
                )
            return self._session

    async def close(self) -> None:
        """Close the aiohttp session. Call this when done with the client."""
        async with self._session_lock:
            if self._session and not self._session.closed:
                await self._session.close()
            self._session = None

    def url_for(self, path: str) -> str:
        """Build the absolute URL for a resource path."""
        return f"{self.base_url}{self.api_prefix}/{path.lstrip('/')}"

    async def fetch_json(self, path: str) -> Any:
        """
        GET a resource and decode its JSON body.

        Raises:
            ApiResponseError: Provider answered with a non-2xx status
            ApiTransportError: Connection failed or the body was not JSON
        """
        url = self.url_for(path)
        session = await self._get_session()
        try:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise ApiResponseError(response.status, url)
                return await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise ApiTransportError(f"Request to {url} failed: {e}", url=url) from e
        except ValueError as e:
            raise ApiTransportError(f"Invalid JSON from {url}: {e}", url=url) from e

    async def _fetch_list(self, path: str, factory: Callable[[dict], T]) -> List[T]:
        payload = await self.fetch_json(path)
        if not isinstance(payload, list):
            raise ApiTransportError(
                f"Expected a JSON array from {self.url_for(path)}, got {type(payload).__name__}",
                url=self.url_for(path),
            )
        items = [factory(item) for item in payload if isinstance(item, dict)]
        logger.debug("GET %s -> %d items", path, len(items))
        return items

    @staticmethod
    def _scoped(resource: str, code: str) -> str:
        return f"{resource}/{urllib.parse.quote(code, safe='')}"

    # =========================================================================
    # GLOBAL RESOURCES
    # =========================================================================

    async def get_countries(self) -> List[Country]:
        return await self._fetch_list("countries", Country.from_dict)

    async def get_statistics(self) -> List[StatisticEntry]:
        return await self._fetch_list("statistics", StatisticEntry.from_dict)

    # =========================================================================
    # COUNTRY-SCOPED RESOURCES
    # =========================================================================

    async def get_places(self, code: str) -> List[Place]:
        return await self._fetch_list(self._scoped("places", code), Place.from_dict)

    async def get_food(self, code: str) -> List[FoodItem]:
        return await self._fetch_list(self._scoped("food", code), FoodItem.from_dict)

    async def get_hospitals(self, code: str) -> List[Hospital]:
        return await self._fetch_list(self._scoped("hospitals", code), Hospital.from_dict)

    async def get_phrases(self, code: str) -> List[PhraseEntry]:
        return await self._fetch_list(self._scoped("language", code), PhraseEntry.from_dict)
