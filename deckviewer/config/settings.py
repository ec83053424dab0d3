"""Global settings and configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name, "")
    try:
        return int(value) if value.strip() else default
    except ValueError:
        return default


@dataclass
class Config:
    """Application-wide configuration."""

    # Cross-platform paths using pathlib
    # BASE_DIR is the project root (parent of deckviewer/)
    BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()

    # Deck source: a directory or an http(s) base URL
    SOURCE: str = os.environ.get("DECKVIEW_SOURCE", str(BASE_DIR / "decks"))
    MANIFEST_FILE: str = os.environ.get("DECKVIEW_MANIFEST", "manifest.json")
    ROOT_MODELS_PATH: str = os.environ.get("DECKVIEW_ROOT_MODELS", "models.json")

    # Rendering
    RENDER_MODE: str = os.environ.get("DECKVIEW_RENDER_MODE", "raw")

    # Async settings
    CONCURRENCY: int = _env_int("DECKVIEW_CONCURRENCY", 4)
    TIMEOUT: int = _env_int("DECKVIEW_TIMEOUT", 30)

    OUTPUT_DIR: str = os.environ.get("DECKVIEW_OUTPUT_DIR", str(BASE_DIR / "data" / "output"))
    LOG_LEVEL: str = os.environ.get("DECKVIEW_LOG_LEVEL", "INFO")
