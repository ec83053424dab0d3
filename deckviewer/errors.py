"""Exception types shared across the viewer."""

from typing import Optional


class DeckViewerError(Exception):
    """Base class for all viewer errors."""


class FetchError(DeckViewerError):
    """A required resource could not be fetched (non-2xx, transport error, missing file)."""

    def __init__(self, path: str, status: Optional[int] = None, reason: str = ""):
        self.path = path
        self.status = status
        self.reason = reason
        if status is not None:
            message = f"HTTP {status} at {path}"
        else:
            message = f"Failed to fetch {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedMarkupError(DeckViewerError):
    """The notes document could not be parsed as markup at all."""
