"""Path-keyed cache of fetched JSON resources."""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

from ..errors import FetchError
from ..fetchers import BaseFetcher, FetchResult

logger = logging.getLogger(__name__)


class JsonCache:
    """
    Memoize decoded JSON resources for the lifetime of a session.

    Only successful fetches are stored; a failed path is fetched again
    on the next request. Concurrent requests for one path share a
    single in-flight fetch.
    """

    def __init__(self, fetcher: BaseFetcher):
        self.fetcher = fetcher
        self.cache: Dict[str, Any] = {}
        self._pending: Dict[str, "asyncio.Future[Any]"] = {}
        self._fetch_count = 0

    async def get(self, path: Optional[str]) -> Any:
        """
        Fetch and decode a JSON resource, from cache when possible.

        Returns:
            Decoded JSON, or None when no path is given

        Raises:
            FetchError: If the fetch fails or the body is not JSON
        """
        if not path:
            return None
        if path in self.cache:
            return self.cache[path]

        pending = self._pending.get(path)
        if pending is None:
            pending = asyncio.ensure_future(self._load(path))
            self._pending[path] = pending
            pending.add_done_callback(lambda _: self._pending.pop(path, None))
        return await pending

    async def _load(self, path: str) -> Any:
        self._fetch_count += 1
        text = await self.fetcher.fetch(path)
        try:
            data = json.loads(text)
        except ValueError as e:
            raise FetchError(path, reason=f"invalid JSON: {e}") from e
        self.cache[path] = data
        logger.debug("Cached %s", path)
        return data

    async def try_get(self, path: Optional[str]) -> FetchResult:
        """Fetch an optional resource; failures come back as an absent result."""
        if not path:
            return FetchResult.absent(path)
        try:
            return FetchResult.success(path, await self.get(path))
        except FetchError as e:
            return FetchResult.absent(path, error=e)

    def clear(self) -> None:
        self.cache = {}

    def get_stats(self) -> Dict:
        """Get cache statistics."""
        return {
            'cached_paths': len(self.cache),
            'fetches': self._fetch_count,
            'in_flight': len(self._pending),
        }
