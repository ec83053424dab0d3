import json

import pytest

from deckviewer.models import DeckNode, load_manifest

MANIFEST = {
    "name": "IoT",
    "deckPath": "deck.json",
    "notesPath": "notes.json",
    "notesHtmlPath": "notes.html",
    "children": [
        {
            "name": "01",
            "deckPath": "01/deck.json",
            "notesPath": "01/notes.json",
            "notesHtmlPath": "01/notes.html",
            "children": [{"name": "a", "deckPath": "01/a/deck.json", "children": []}],
            "modelsPath": "01/models.json",
        },
        {"name": "02", "deckPath": "02/deck.json", "notesHtmlPath": "02/notes.html", "children": []},
    ],
}


def test_load_json_manifest():
    root = load_manifest(json.dumps(MANIFEST))
    assert root.name == "IoT"
    assert root.models_path is None
    assert [n.path for n in root.walk()] == ["IoT", "IoT/01", "IoT/01/a", "IoT/02"]
    first = root.children[0]
    assert first.models_path == "01/models.json"
    assert first.notes_path == "01/notes.json"


def test_load_script_manifest():
    text = "window.deckManifest = " + json.dumps(MANIFEST, indent=4) + ";\n"
    assert load_manifest(text).children[1].name == "02"


def test_notes_html_path_defaults_beside_deck():
    leaf = load_manifest(json.dumps(MANIFEST)).find("01/a")
    assert leaf.notes_html_path == "01/a/notes.html"


def test_find_with_and_without_root_name():
    root = load_manifest(json.dumps(MANIFEST))
    assert root.find("IoT/02") is root.find("02")
    assert root.find("IoT") is root
    assert root.find("03") is None


def test_non_object_manifest_rejected():
    with pytest.raises(ValueError):
        load_manifest("[1, 2]")


def test_from_dict_minimal():
    node = DeckNode.from_dict({"name": "solo"})
    assert node.deck_path == "deck.json"
    assert node.notes_html_path == "notes.html"
    assert node.children == []
