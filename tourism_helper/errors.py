"""Exception hierarchy for Turizm Helper."""

from typing import Optional


class TourismHelperError(Exception):
    """Base class for all application errors."""


class ApiError(TourismHelperError):
    """A request to the tourism data provider failed."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class ApiResponseError(ApiError):
    """The provider answered with a non-2xx status."""

    def __init__(self, status: int, url: str) -> None:
        super().__init__(f"HTTP {status} from {url}", url=url)
        self.status = status


class ApiTransportError(ApiError):
    """The request never produced a response (DNS, connection, bad payload)."""


class SpeechError(TourismHelperError):
    """Speech synthesis or playback failed."""
