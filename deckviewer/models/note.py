"""Note record recovered from a notes document."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Card element attributes copied onto the note when present
NOTE_ATTRIBUTE_KEYS = ("guid", "note_model_uuid", "deck_name")


@dataclass
class Note:
    """Source data for one flashcard."""

    attributes: Dict[str, str] = field(default_factory=dict)
    # Positional; names come from the resolved model
    fields: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def guid(self) -> Optional[str]:
        return self.attributes.get("guid")

    @property
    def model_uuid(self) -> Optional[str]:
        """Primary model reference."""
        return self.attributes.get("note_model_uuid")

    @property
    def model_id(self) -> Optional[str]:
        """Secondary model reference, carried as an extra value."""
        value = self.extra.get("note_model_id")
        if value is None or isinstance(value, (dict, list)):
            return None
        return str(value)

    @property
    def tags_text(self) -> str:
        return " ".join(self.tags)
