import asyncio
import json
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from deckviewer.errors import FetchError
from deckviewer.fetchers import BaseFetcher
from deckviewer.models import DeckNode, NoteModel


BASIC_MODEL = {
    "crowdanki_uuid": "uuid-basic",
    "id": 1342697561,
    "name": "Basic",
    "flds": [{"name": "Front"}, {"name": "Back"}],
    "tmpls": [
        {
            "name": "Card 1",
            "qfmt": "<div class=\"q\">{{Front}}</div>",
            "afmt": "{{FrontSide}}<hr id=\"answer\">{{Back}}",
        }
    ],
    "css": ".card { color: navy; }",
}

SCRIPTED_MODEL = {
    "crowdanki_uuid": "uuid-scripted",
    "name": "Scripted",
    "flds": [{"name": "Front"}, {"name": "Back"}],
    "tmpls": [
        {
            "name": "Card 1",
            "qfmt": (
                "<link rel=\"stylesheet\" href=\"https://cdn.example/katex.css\">"
                "<script src=\"https://cdn.example/katex.js\" defer></script>"
                "<span class=\"math\">{{Front}}</span>"
                "<script>renderMath();</script>"
            ),
            "afmt": "{{FrontSide}}<hr id=\"answer\">{{Back}}",
        }
    ],
    "css": "",
}


def card_html(fields: List[str], tags: str = "", attrs: Optional[Dict[str, str]] = None,
              extras: Optional[Dict[str, str]] = None) -> str:
    attr_text = "".join(f' {k}="{v}"' for k, v in (attrs or {}).items())
    parts = [f'<div class="card"{attr_text}>']
    parts += [f'<div class="field">{value}</div>' for value in fields]
    if tags:
        parts.append(f'<div class="tags">{tags}</div>')
    for key, value in (extras or {}).items():
        parts.append(f'<div class="extra" key="{key}">{value}</div>')
    parts.append("</div>")
    return "".join(parts)


def notes_document(*cards: str) -> str:
    return f'<html><body><div class="cards">{"".join(cards)}</div></body></html>'


def models_json(*models: dict) -> str:
    return json.dumps({"note_models": list(models)})


class MemoryFetcher(BaseFetcher):
    """In-memory resources; paths listed in ``gates`` wait for their event."""

    def __init__(self, files: Dict[str, str], gates: Optional[Dict[str, asyncio.Event]] = None):
        self.files = dict(files)
        self.gates = gates or {}
        self.calls: List[str] = []
        self.closed = False

    async def fetch(self, path: str) -> str:
        self.calls.append(path)
        gate = self.gates.get(path)
        if gate is not None:
            await gate.wait()
        await asyncio.sleep(0)
        if path not in self.files:
            raise FetchError(path, status=404)
        return self.files[path]

    async def close(self) -> None:
        self.closed = True


def deck_node(name: str, folder: str, models: bool = True) -> DeckNode:
    return DeckNode(
        name=name,
        deck_path=f"{folder}/deck.json",
        notes_html_path=f"{folder}/notes.html",
        models_path=f"{folder}/models.json" if models else None,
        path=name,
    )


@pytest.fixture
def basic_model() -> NoteModel:
    return NoteModel.from_dict(BASIC_MODEL)


@pytest.fixture
def scripted_model() -> NoteModel:
    return NoteModel.from_dict(SCRIPTED_MODEL)


@pytest.fixture
def deck_tree(tmp_path: Path) -> Path:
    """
    A small on-disk corpus:

    root models.json holds Basic; deck 01 has its own models.json with
    Scripted; deck 02 references a models.json that does not exist.
    """
    manifest = {
        "name": "Study",
        "deckPath": "deck.json",
        "notesHtmlPath": "notes.html",
        "children": [
            {"name": "01", "deckPath": "01/deck.json", "notesHtmlPath": "01/notes.html",
             "children": [], "modelsPath": "01/models.json"},
            {"name": "02", "deckPath": "02/deck.json", "notesHtmlPath": "02/notes.html",
             "children": [], "modelsPath": "02/models.json"},
        ],
    }
    (tmp_path / "manifest.json").write_text(json.dumps(manifest), encoding="utf-8")
    (tmp_path / "models.json").write_text(models_json(BASIC_MODEL), encoding="utf-8")
    (tmp_path / "deck.json").write_text("{}", encoding="utf-8")
    (tmp_path / "notes.html").write_text("<html><body></body></html>", encoding="utf-8")

    deck_01 = tmp_path / "01"
    deck_01.mkdir()
    (deck_01 / "deck.json").write_text('{"name": "01"}', encoding="utf-8")
    (deck_01 / "models.json").write_text(models_json(SCRIPTED_MODEL), encoding="utf-8")
    (deck_01 / "notes.html").write_text(
        notes_document(
            card_html(["x^2", "parabola"], tags="math", attrs={"note_model_uuid": "uuid-scripted"}),
            card_html(["y^3", "cubic"], tags="math", attrs={"note_model_uuid": "uuid-scripted"}),
        ),
        encoding="utf-8",
    )

    deck_02 = tmp_path / "02"
    deck_02.mkdir()
    (deck_02 / "deck.json").write_text('{"name": "02"}', encoding="utf-8")
    (deck_02 / "notes.html").write_text(
        notes_document(
            card_html(["2+2", "4"], tags="algebra", attrs={"guid": "g1", "note_model_uuid": "uuid-basic"}),
            card_html(["3*3", "9"], extras={"note_model_id": "1342697561"}),
            card_html(["orphan"], attrs={"note_model_uuid": "missing"}),
        ),
        encoding="utf-8",
    )
    return tmp_path
