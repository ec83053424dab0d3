"""Data models for DeckViewer."""

from .note import Note, NOTE_ATTRIBUTE_KEYS
from .note_model import NoteModel, FieldDef, CardTemplate, RenderMode, parse_model_list
from .manifest import DeckNode, load_manifest

__all__ = [
    'Note',
    'NOTE_ATTRIBUTE_KEYS',
    'NoteModel',
    'FieldDef',
    'CardTemplate',
    'RenderMode',
    'parse_model_list',
    'DeckNode',
    'load_manifest',
]
