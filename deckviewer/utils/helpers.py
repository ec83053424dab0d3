"""Utility functions."""

import re
from pathlib import Path

_UNSAFE_CHARS = re.compile(r'[^\w.-]+')


def ensure_dir(path: str) -> None:
    """Ensure directory exists."""
    Path(path).mkdir(parents=True, exist_ok=True)


def deck_output_name(deck_path: str) -> str:
    """Filename for a rendered deck page, e.g. "IoT/01" -> "IoT_01.html"."""
    stem = _UNSAFE_CHARS.sub('_', deck_path.strip('/').replace('/', '_'))
    return f"{stem or 'deck'}.html"
