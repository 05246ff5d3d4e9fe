"""Fetchers module - data provider clients."""

from .base import BaseFetcher
from .api_client import TourismApiClient

__all__ = [
    'BaseFetcher',
    'TourismApiClient',
]
