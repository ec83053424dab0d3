"""Fetchers module - deck resources over HTTP or from a local directory."""

from .base import BaseFetcher, FetchResult
from .http import HttpFetcher
from .local import LocalFetcher
from .factory import create_fetcher

__all__ = [
    'BaseFetcher',
    'FetchResult',
    'HttpFetcher',
    'LocalFetcher',
    'create_fetcher',
]
