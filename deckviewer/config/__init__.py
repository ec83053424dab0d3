"""Configuration module for DeckViewer."""

from .settings import Config

__all__ = ['Config']
