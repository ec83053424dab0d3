"""Deck session: load a deck's notes and models and render every card."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from ..config import Config
from ..corpus import NotesParser
from ..errors import DeckViewerError
from ..fetchers import BaseFetcher
from ..models import DeckNode, Note, NoteModel, RenderMode, parse_model_list
from ..registry import DeferredScripts, ModelRegistry, ResourceRegistry
from ..render import CardRenderer, PageDocument, RenderedCard, ResourceHoister
from ..templates import PageTemplates
from .cache import JsonCache

logger = logging.getLogger(__name__)


class DeckRenderStatus(str, Enum):
    RENDERED = "rendered"
    EMPTY = "empty"
    FAILED = "failed"
    # A newer selection started before this one finished
    SUPERSEDED = "superseded"


@dataclass
class DeckRenderResult:
    deck: DeckNode
    status: DeckRenderStatus
    cards: List[RenderedCard] = field(default_factory=list)
    scripts_run: int = 0
    error: Optional[Exception] = None

    @property
    def card_count(self) -> int:
        return len(self.cards)


class DeckSession:
    """
    One viewer session over a deck tree.

    Owns the session-scoped state: the model registry and resource
    registry (which only grow), the deferred script set (reset at every
    deck render) and the JSON fetch cache.
    """

    def __init__(
        self,
        fetcher: BaseFetcher,
        manifest: Optional[DeckNode] = None,
        render_mode: Union[RenderMode, str] = RenderMode.RAW,
        root_models_path: Optional[str] = None,
        progress_callback: Optional[Callable[[Dict[str, Any]], None]] = None
    ) -> None:
        """
        Initialize a session.

        Args:
            fetcher: Source of deck resources
            manifest: Root of the deck tree
            render_mode: 'raw' or 'model'
            root_models_path: Root-level model resource (defaults to Config.ROOT_MODELS_PATH)
            progress_callback: Optional callback for progress updates.
                              Payload schema: {"event": "log"|"progress", "message": str, "value": float}
        """
        self.fetcher = fetcher
        self.manifest = manifest
        self.render_mode = RenderMode.parse(render_mode)
        self.root_models_path = root_models_path if root_models_path is not None else Config.ROOT_MODELS_PATH
        self.progress_callback = progress_callback or self._default_callback

        self.models = ModelRegistry()
        self.resources = ResourceRegistry()
        self.deferred = DeferredScripts()
        self.cache = JsonCache(fetcher)

        self.document = PageDocument()
        self.hoister = ResourceHoister(self.document, self.resources, self.deferred)
        self.renderer = CardRenderer(self.document, self.hoister)

        self.current_deck: Optional[DeckNode] = None
        self.cards: List[RenderedCard] = []
        self._selection_token = 0

    @staticmethod
    def _default_callback(payload: Dict[str, Any]) -> None:
        """Default callback that forwards to the logger."""
        if payload.get("event") == "log":
            logger.info(payload.get("message", ""))
        elif payload.get("event") == "progress":
            logger.debug("[%.1f%%] %s", payload.get("value", 0), payload.get("message", ""))

    def _emit(self, event: str, message: str = "", value: float = 0.0) -> None:
        """
        Emit a progress event via the callback.

        Args:
            event: Event type ('log' or 'progress')
            message: Human-readable message
            value: Progress value (0-100 for progress events)
        """
        self.progress_callback({"event": event, "message": message, "value": value})

    def _register_models(self, models: List[NoteModel]) -> None:
        self.models.merge(models)
        self.hoister.preload_libraries(models)

    async def init(self) -> bool:
        """
        Load the root-level model resource as a baseline.

        Returns:
            True if root models were loaded
        """
        result = await self.cache.try_get(self.root_models_path)
        if not result.ok:
            logger.warning(
                "Could not load root models (%s), models might be missing if not in subdecks",
                result.error or "no path configured",
            )
            return False
        models = parse_model_list(result.data)
        self._register_models(models)
        self._emit("log", f"Loaded {len(models)} root note models")
        return True

    async def select_deck(self, node: DeckNode) -> DeckRenderResult:
        """
        Load and render one deck into the page.

        Failures are shown on the page and reported in the result; they
        never propagate and never touch the registries.
        """
        self._selection_token += 1
        token = self._selection_token

        self.current_deck = node
        self.document.set_title(node.name)
        self.document.set_controls_visible(self.render_mode.value)
        self.document.show_message(PageTemplates.LOADING_HTML)

        try:
            notes = await self._load_notes(node)
        except DeckViewerError as e:
            return self._fail(node, token, e)
        except Exception as e:
            logger.exception("Unexpected error loading deck %s", node.name)
            return self._fail(node, token, e)

        models_result = await self.cache.try_get(node.models_path)
        if models_result.ok:
            self._register_models(parse_model_list(models_result.data))
        elif node.models_path:
            logger.info("Deck models unavailable for %s (%s), using loaded models", node.name, models_result.error)

        if token != self._selection_token:
            logger.debug("Selection of %s superseded", node.name)
            return DeckRenderResult(deck=node, status=DeckRenderStatus.SUPERSEDED)

        return self.render_cards(node, notes)

    async def _load_notes(self, node: DeckNode) -> List[Note]:
        # Deck data and notes markup are fetched together; either failing fails both
        results = await asyncio.gather(
            self.cache.get(node.deck_path),
            self.fetcher.fetch(node.notes_html_path),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        _deck_data, notes_html = results
        return NotesParser.parse(notes_html)

    def _fail(self, node: DeckNode, token: int, error: Exception) -> DeckRenderResult:
        if token != self._selection_token:
            return DeckRenderResult(deck=node, status=DeckRenderStatus.SUPERSEDED, error=error)
        logger.error("Error loading deck %s: %s", node.name, error)
        self.cards = []
        self.document.reset_scripts()
        self.deferred.clear()
        self.document.show_message(PageTemplates.error_html(error))
        return DeckRenderResult(deck=node, status=DeckRenderStatus.FAILED, error=error)

    def render_cards(self, node: DeckNode, notes: List[Note]) -> DeckRenderResult:
        """Render every note, then run each collected inline script once."""
        self.document.clear_cards()
        self.document.reset_scripts()
        self.deferred.clear()
        self.cards = []

        if not notes:
            self.document.show_message(PageTemplates.EMPTY_HTML)
            return DeckRenderResult(deck=node, status=DeckRenderStatus.EMPTY)

        total = len(notes)
        for index, note in enumerate(notes):
            model = self.models.resolve(note)
            card = self.renderer.render_note(note, model, self.render_mode)
            self.document.append_card(card.element)
            self.cards.append(card)
            self._emit("progress", node.name, (index + 1) / total * 100)

        for script in self.deferred:
            self.document.run_script(script)

        self._emit("log", f"Rendered {total} cards for {node.name} ({self.render_mode.value} mode)")
        return DeckRenderResult(
            deck=node,
            status=DeckRenderStatus.RENDERED,
            cards=list(self.cards),
            scripts_run=len(self.deferred),
        )

    async def set_render_mode(self, mode: Union[RenderMode, str]) -> Optional[DeckRenderResult]:
        """Switch modes and re-render the selected deck in place."""
        self.render_mode = RenderMode.parse(mode)
        if self.current_deck is None:
            return None
        return await self.select_deck(self.current_deck)

    def render_page(self) -> str:
        return self.document.render()

    async def close(self) -> None:
        await self.fetcher.close()
