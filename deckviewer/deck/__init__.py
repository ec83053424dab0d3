"""Deck session module."""

from .cache import JsonCache
from .session import DeckRenderResult, DeckRenderStatus, DeckSession

__all__ = ['JsonCache', 'DeckSession', 'DeckRenderResult', 'DeckRenderStatus']
