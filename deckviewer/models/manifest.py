"""Deck manifest: a static tree of named deck nodes."""

import json
import posixpath
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

# window.deckManifest = {...};
_SCRIPT_ASSIGNMENT = re.compile(r'^\s*(?:window\.)?\w+\s*=\s*(\{.*\})\s*;?\s*$', re.DOTALL)


@dataclass
class DeckNode:
    """One node of the deck tree."""

    name: str
    deck_path: str
    notes_html_path: str
    notes_path: Optional[str] = None
    models_path: Optional[str] = None
    children: List["DeckNode"] = field(default_factory=list)
    # "/"-joined chain of names from the root, set by from_dict
    path: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any], parent_path: str = "") -> "DeckNode":
        name = str(data.get("name", ""))
        deck_path = str(data.get("deckPath") or "deck.json")
        notes_html_path = data.get("notesHtmlPath")
        if not notes_html_path:
            notes_html_path = posixpath.join(posixpath.dirname(deck_path), "notes.html")
        node_path = f"{parent_path}/{name}" if parent_path else name
        return cls(
            name=name,
            deck_path=deck_path,
            notes_html_path=str(notes_html_path),
            notes_path=data.get("notesPath"),
            models_path=data.get("modelsPath") or None,
            children=[
                cls.from_dict(child, node_path)
                for child in data.get("children") or []
                if isinstance(child, dict)
            ],
            path=node_path,
        )

    def walk(self) -> Iterator["DeckNode"]:
        """Depth-first, pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, path: str) -> Optional["DeckNode"]:
        """Find a node by its "/"-joined name chain, with or without the root name."""
        wanted = path.strip("/")
        for node in self.walk():
            if node.path == wanted:
                return node
        prefixed = f"{self.name}/{wanted}" if wanted else self.name
        for node in self.walk():
            if node.path == prefixed:
                return node
        return None


def load_manifest(text: str) -> DeckNode:
    """
    Parse a manifest given either as JSON or as a script assignment.

    Raises:
        ValueError: If the text holds no manifest object
    """
    match = _SCRIPT_ASSIGNMENT.match(text)
    body = match.group(1) if match else text
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError("Manifest root must be an object")
    return DeckNode.from_dict(data)
