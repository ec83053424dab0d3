"""Note type definitions loaded from model resources."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class RenderMode(str, Enum):
    """How cards are displayed."""

    RAW = "raw"
    MODEL = "model"

    @classmethod
    def parse(cls, value: Any) -> "RenderMode":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for mode in cls:
            if mode.value == text:
                return mode
        raise ValueError(f"Unknown render mode '{value}'. Expected one of: raw, model")


@dataclass(frozen=True)
class FieldDef:
    name: str


@dataclass(frozen=True)
class CardTemplate:
    name: str = ""
    qfmt: str = ""
    afmt: str = ""


def _normalize_id(value: Any) -> Optional[str]:
    """Model ids are matched as strings; numeric ids and string ids of the same value coincide."""
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    text = str(value)
    return text or None


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


@dataclass(frozen=True)
class NoteModel:
    """
    A note type: ordered field definitions, card templates and shared CSS.

    A model may carry a CrowdAnki uuid, a numeric Anki id, or both.
    """

    crowdanki_uuid: Optional[str] = None
    id: Optional[str] = None
    name: str = ""
    flds: Tuple[FieldDef, ...] = ()
    tmpls: Tuple[CardTemplate, ...] = ()
    css: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NoteModel":
        """Build a model from its CrowdAnki JSON representation."""
        fields = tuple(
            FieldDef(name=str(f.get("name", "")))
            for f in _as_list(data.get("flds"))
            if isinstance(f, dict)
        )
        templates = tuple(
            CardTemplate(
                name=str(t.get("name") or ""),
                qfmt=str(t.get("qfmt") or ""),
                afmt=str(t.get("afmt") or ""),
            )
            for t in _as_list(data.get("tmpls"))
            if isinstance(t, dict)
        )
        return cls(
            crowdanki_uuid=_normalize_id(data.get("crowdanki_uuid")),
            id=_normalize_id(data.get("id")),
            name=str(data.get("name") or ""),
            flds=fields,
            tmpls=templates,
            css=str(data.get("css") or ""),
        )

    @property
    def identifiers(self) -> List[str]:
        return [key for key in (self.crowdanki_uuid, self.id) if key]

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.flds]

    @property
    def first_template(self) -> Optional[CardTemplate]:
        return self.tmpls[0] if self.tmpls else None


def parse_model_list(payload: Any) -> List[NoteModel]:
    """Read the ``note_models`` list of a model resource."""
    if not isinstance(payload, dict):
        return []
    entries = payload.get("note_models") or []
    if not isinstance(entries, list):
        return []
    return [NoteModel.from_dict(entry) for entry in entries if isinstance(entry, dict)]
