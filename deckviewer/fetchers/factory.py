"""Pick a fetcher for a deck source."""

from pathlib import Path
from typing import Optional, Union

from .base import BaseFetcher
from .http import HttpFetcher
from .local import LocalFetcher


def create_fetcher(source: Union[str, Path], timeout: Optional[int] = None) -> BaseFetcher:
    """HTTP(S) base URLs get an HttpFetcher, anything else is a local directory."""
    text = str(source)
    if text.startswith(("http://", "https://")):
        return HttpFetcher(text, timeout=timeout)
    return LocalFetcher(text)
