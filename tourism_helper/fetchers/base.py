"""Base fetcher class."""

from abc import ABC, abstractmethod
from typing import Any


class BaseFetcher(ABC):
    """
    Abstract base class for data-provider clients.

    Provides lifecycle management and async context manager support.
    Subclasses implement fetch_json() and optionally override close().
    """

    @abstractmethod
    async def fetch_json(self, path: str) -> Any:
        """
        Fetch and decode a JSON resource.

        Args:
            path: Resource path relative to the API root, e.g. "places/TR"

        Returns:
            Decoded JSON payload

        Raises:
            ApiError: On transport failure or a non-2xx response
        """
        pass

    async def close(self) -> None:
        """
        Close any open resources (sessions, connections, etc.).

        Subclasses should override this to clean up their resources.
        """
        pass

    async def __aenter__(self) -> "BaseFetcher":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - ensure resources are closed."""
        await self.close()
