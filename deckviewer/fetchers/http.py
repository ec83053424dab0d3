"""HTTP fetcher with a pooled aiohttp session."""

import asyncio
from typing import Optional
from urllib.parse import urljoin

import aiohttp

from ..config import Config
from ..errors import FetchError
from .base import BaseFetcher


class HttpFetcher(BaseFetcher):
    """Fetch deck resources relative to a base URL."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[int] = None,
        concurrency: Optional[int] = None
    ):
        """
        Initialize HTTP fetcher.

        Args:
            base_url: URL that deck paths are resolved against
            timeout: Total request timeout in seconds (defaults to Config.TIMEOUT)
            concurrency: Connection pool size per host (defaults to Config.CONCURRENCY)
        """
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout or Config.TIMEOUT
        self.concurrency = concurrency or Config.CONCURRENCY
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_lock = asyncio.Lock()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create a shared aiohttp session (connection pooling)."""
        async with self._session_lock:
            if self._session is None or self._session.closed:
                connector = aiohttp.TCPConnector(
                    limit=self.concurrency * 2,
                    limit_per_host=self.concurrency,
                )
                self._session = aiohttp.ClientSession(
                    connector=connector,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                )
            return self._session

    def url_for(self, path: str) -> str:
        return urljoin(self.base_url, path.lstrip("/"))

    async def fetch(self, path: str) -> str:
        session = await self._get_session()
        url = self.url_for(path)
        try:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise FetchError(path, status=response.status)
                return await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(path, reason=str(e) or type(e).__name__) from e
        except UnicodeDecodeError as e:
            raise FetchError(path, reason=f"undecodable body: {e.reason}") from e

    async def close(self) -> None:
        """Close the aiohttp session. Call this when done with the fetcher."""
        async with self._session_lock:
            if self._session and not self._session.closed:
                await self._session.close()
                self._session = None
