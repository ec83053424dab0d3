"""DeckViewer - Flashcard deck renderer"""

__version__ = "1.0.0"
__author__ = "DeckViewer Team"

from .deck import DeckSession, JsonCache
from .config import Config
from .models import Note, NoteModel, DeckNode, RenderMode
from .corpus import NotesParser
from .templates import apply_template, render_sides
from .fetchers import HttpFetcher, LocalFetcher, create_fetcher

__all__ = [
    'DeckSession',
    'JsonCache',
    'Config',
    'Note',
    'NoteModel',
    'DeckNode',
    'RenderMode',
    'NotesParser',
    'apply_template',
    'render_sides',
    'HttpFetcher',
    'LocalFetcher',
    'create_fetcher',
]
