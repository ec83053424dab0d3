"""
Structural document abstraction.

Wraps a BeautifulSoup tree behind a small contract so the notes parser
walks elements by class name in document order without touching the
parser library directly.
"""

from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from ..errors import MalformedMarkupError

MARKUP_PARSER = "html.parser"


class MarkupElement:
    """One element of a parsed document."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def _has_class(self, tag: Tag, class_name: str) -> bool:
        return class_name in (tag.get("class") or [])

    def find_first(self, class_name: str) -> Optional["MarkupElement"]:
        """First descendant carrying the class, in document order."""
        found = self._tag.find(lambda t: self._has_class(t, class_name))
        return MarkupElement(found) if found is not None else None

    def children(self, class_name: str) -> List["MarkupElement"]:
        """Direct children carrying the class, in document order."""
        return [
            MarkupElement(child)
            for child in self._tag.children
            if isinstance(child, Tag) and self._has_class(child, class_name)
        ]

    def child(self, class_name: str) -> Optional["MarkupElement"]:
        """First direct child carrying the class."""
        for child in self._tag.children:
            if isinstance(child, Tag) and self._has_class(child, class_name):
                return MarkupElement(child)
        return None

    def has_attr(self, name: str) -> bool:
        return self._tag.has_attr(name)

    def get_attr(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if value is None:
            return None
        # Multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    @property
    def text(self) -> str:
        return self._tag.get_text()

    @property
    def inner_html(self) -> str:
        return "".join(str(child) for child in self._tag.contents)


def parse_markup(markup: Union[str, bytes]) -> MarkupElement:
    """
    Parse a document into its root element.

    Raises:
        MalformedMarkupError: If the input is not markup text or the parser rejects it
    """
    if not isinstance(markup, (str, bytes)):
        raise MalformedMarkupError(f"Expected markup text, got {type(markup).__name__}")
    try:
        soup = BeautifulSoup(markup, MARKUP_PARSER)
    except ParserRejectedMarkup as e:
        raise MalformedMarkupError(str(e)) from e
    return MarkupElement(soup)
