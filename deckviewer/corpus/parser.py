"""Notes document parser."""

import json
import logging
from typing import Any, List, Union

from ..models import NOTE_ATTRIBUTE_KEYS, Note
from .markup import MarkupElement, parse_markup

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


class NotesParser:
    """
    Recover note records from a notes document.

    Expected shape::

        <div class="cards">
          <div class="card" guid="..." note_model_uuid="...">
            <div class="field">...</div>
            <div class="tags">tag1 tag2</div>
            <div class="extra" key="note_model_id">1342697561</div>
          </div>
        </div>
    """

    CONTAINER_CLASS = "cards"
    CARD_CLASS = "card"
    FIELD_CLASS = "field"
    TAGS_CLASS = "tags"
    EXTRA_CLASS = "extra"
    EXTRA_KEY_ATTR = "key"

    @classmethod
    def parse(cls, markup: Union[str, bytes]) -> List[Note]:
        """
        Parse every card of the document, in document order.

        Missing optional structure is tolerated; a document without a
        cards container is an empty deck.

        Raises:
            MalformedMarkupError: If the input cannot be parsed at all
        """
        root = parse_markup(markup)
        container = root.find_first(cls.CONTAINER_CLASS)
        if container is None:
            logger.debug("No '.%s' container in notes document", cls.CONTAINER_CLASS)
            return []
        return [cls.parse_card(card) for card in container.children(cls.CARD_CLASS)]

    @classmethod
    def parse_card(cls, card: MarkupElement) -> Note:
        note = Note()

        for key in NOTE_ATTRIBUTE_KEYS:
            if card.has_attr(key):
                note.attributes[key] = card.get_attr(key) or ""

        note.fields = [field.inner_html for field in card.children(cls.FIELD_CLASS)]

        tags_el = card.child(cls.TAGS_CLASS)
        if tags_el is not None:
            note.tags = cls.split_tags(tags_el.text)

        for extra_el in card.children(cls.EXTRA_CLASS):
            key = extra_el.get_attr(cls.EXTRA_KEY_ATTR)
            if key:
                note.extra[key] = cls.decode_extra(extra_el.text)

        return note

    @staticmethod
    def split_tags(text: str) -> List[str]:
        """Whitespace-separated tags; repeats keep their first position."""
        tags: List[str] = []
        for token in text.split():
            if token not in tags:
                tags.append(token)
        return tags

    @staticmethod
    def decode_extra(text: str) -> Any:
        """Strict JSON decode, falling back to the raw text."""
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except ValueError:
            return text
