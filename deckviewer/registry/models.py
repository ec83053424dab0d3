"""Model registry: model identifier -> note model."""

import logging
from typing import Dict, Iterable, List, Optional

from ..models import Note, NoteModel

logger = logging.getLogger(__name__)


class ModelRegistry:
    """
    Layered model lookup built from successive model resources.

    Every model is registered under each identifier it carries. Later
    merges overwrite earlier entries with the same key, so deck-local
    models shadow root-level ones.
    """

    def __init__(self) -> None:
        self._models: Dict[str, NoteModel] = {}

    def merge(self, models: Iterable[NoteModel]) -> int:
        """
        Register models under all of their identifiers.

        Returns:
            Number of keys written
        """
        written = 0
        for model in models:
            for key in model.identifiers:
                previous = self._models.get(key)
                if previous is not None and previous is not model:
                    logger.debug("Model key %s now resolves to '%s' (was '%s')", key, model.name, previous.name)
                self._models[key] = model
                written += 1
        return written

    def lookup(self, key: Optional[str]) -> Optional[NoteModel]:
        """Exact key match only."""
        if not key:
            return None
        return self._models.get(key)

    def resolve(self, note: Note) -> Optional[NoteModel]:
        """Primary reference first, then the secondary one."""
        model = self.lookup(note.model_uuid)
        if model is None:
            model = self.lookup(note.model_id)
        return model

    def models(self) -> List[NoteModel]:
        """Distinct registered models, in first-registration order."""
        seen: List[NoteModel] = []
        for model in self._models.values():
            if not any(model is s for s in seen):
                seen.append(model)
        return seen

    def __contains__(self, key: object) -> bool:
        return key in self._models

    def __len__(self) -> int:
        return len(self._models)
