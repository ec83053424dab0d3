"""Local directory fetcher."""

from pathlib import Path
from typing import Union

import aiofiles

from ..errors import FetchError
from .base import BaseFetcher


class LocalFetcher(BaseFetcher):
    """Read deck resources from a directory tree."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()

    def resolve(self, path: str) -> Path:
        """
        Map a resource path to a file under the root.

        Raises:
            FetchError: If the path escapes the root directory
        """
        target = (self.root / path.lstrip("/")).resolve()
        try:
            target.relative_to(self.root)
        except ValueError:
            raise FetchError(path, status=403, reason="outside deck root") from None
        return target

    async def fetch(self, path: str) -> str:
        target = self.resolve(path)
        try:
            async with aiofiles.open(target, "r", encoding="utf-8") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise FetchError(path, status=404) from e
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(path, reason=str(e)) from e
