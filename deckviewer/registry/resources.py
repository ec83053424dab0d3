"""Hoisted-resource registry and the deferred script set."""

from typing import Dict, Iterator, Set


class ResourceRegistry:
    """URLs already hoisted into the shared page. Append-only."""

    def __init__(self) -> None:
        self._urls: Set[str] = set()

    def claim(self, url: str) -> bool:
        """
        Check and register in one step.

        Returns:
            True if the URL was not registered before this call
        """
        if url in self._urls:
            return False
        self._urls.add(url)
        return True

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)


class DeferredScripts:
    """Inline script bodies collected during one deck render, deduplicated by exact text."""

    def __init__(self) -> None:
        # dict keeps insertion order
        self._scripts: Dict[str, None] = {}

    def add(self, content: str) -> bool:
        if content in self._scripts:
            return False
        self._scripts[content] = None
        return True

    def clear(self) -> None:
        self._scripts.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._scripts))

    def __len__(self) -> int:
        return len(self._scripts)
