"""
Minimal Anki-style template substitution.

Only literal ``{{Field}}`` interpolation and ``{{FrontSide}}`` inlining
are supported. Section and filter syntax is left in place untouched.
"""

import re
from typing import Dict, Mapping, NamedTuple, Optional

from ..models import Note, NoteModel

# {{ key }} with no braces inside the key
PLACEHOLDER_PATTERN = re.compile(r'\{\{([^{}]+?)\}\}')

FRONT_SIDE_MARKER = "{{FrontSide}}"
TAGS_KEY = "Tags"


class CardSides(NamedTuple):
    front: str
    back: str


def apply_template(template: Optional[str], context: Mapping[str, str]) -> str:
    """
    Substitute ``{{key}}`` placeholders from context.

    Values are inserted verbatim (they are already HTML). Unknown keys
    leave the placeholder text as it was.
    """
    if not template:
        return ""

    def _replace(match: "re.Match[str]") -> str:
        key = match.group(1).strip()
        if key in context:
            return context[key]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def build_context(note: Note, model: NoteModel) -> Dict[str, str]:
    """Zip note fields with model field names by position, plus a Tags entry."""
    context: Dict[str, str] = {}
    for value, field_def in zip(note.fields, model.flds):
        context[field_def.name] = value
    context[TAGS_KEY] = note.tags_text
    return context


def render_sides(qfmt: Optional[str], afmt: Optional[str], context: Mapping[str, str]) -> CardSides:
    """
    Render both sides with the same context, then inline the rendered
    front into every ``{{FrontSide}}`` of the back.
    """
    front = apply_template(qfmt, context)
    back = apply_template(afmt, context)
    back = back.replace(FRONT_SIDE_MARKER, front)
    return CardSides(front=front, back=back)
