"""Utils module."""

from .helpers import ensure_dir, deck_output_name
from .logger import setup_logger

__all__ = [
    'ensure_dir',
    'deck_output_name',
    'setup_logger'
]
