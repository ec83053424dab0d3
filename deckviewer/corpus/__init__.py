"""Notes document parsing."""

from .markup import MarkupElement, parse_markup
from .parser import NotesParser

__all__ = ['MarkupElement', 'parse_markup', 'NotesParser']
