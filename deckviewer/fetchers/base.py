"""Base fetcher class."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..errors import FetchError


class BaseFetcher(ABC):
    """
    Abstract base class for all fetchers.

    Provides lifecycle management and async context manager support.
    Subclasses should implement fetch() and optionally override close().
    """

    @abstractmethod
    async def fetch(self, path: str) -> str:
        """
        Fetch a resource as text.

        Args:
            path: Resource path relative to the deck source

        Returns:
            Resource body

        Raises:
            FetchError: On a non-2xx status, transport failure or missing file
        """

    async def close(self) -> None:
        """
        Close any open resources (sessions, connections, etc.).

        Subclasses should override this to clean up their resources.
        """

    async def __aenter__(self) -> "BaseFetcher":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - ensure resources are closed."""
        await self.close()


@dataclass(frozen=True)
class FetchResult:
    """Outcome of fetching an optional resource: present with data, or absent."""

    path: Optional[str]
    ok: bool
    data: Any = None
    error: Optional[FetchError] = None

    @classmethod
    def success(cls, path: str, data: Any) -> "FetchResult":
        return cls(path=path, ok=True, data=data)

    @classmethod
    def absent(cls, path: Optional[str], error: Optional[FetchError] = None) -> "FetchResult":
        return cls(path=path, ok=False, error=error)
