"""Move stylesheet and script references out of card fragments into the shared page."""

import logging
from typing import Iterable

from bs4 import BeautifulSoup

from ..corpus.markup import MARKUP_PARSER
from ..models import NoteModel
from ..registry import DeferredScripts, ResourceRegistry
from .document import PageDocument

logger = logging.getLogger(__name__)


class ResourceHoister:
    """
    Hoist external resources once per page and defer inline scripts.

    Many cards share one model template, so the same stylesheet or library
    shows up in every card. Each URL is added to the page at most once;
    inline scripts are collected into the deferred set and run once after
    the whole deck is rendered.
    """

    def __init__(self, document: PageDocument, registry: ResourceRegistry, deferred: DeferredScripts):
        self.document = document
        self.registry = registry
        self.deferred = deferred

    def hoist(self, html: str, libraries_only: bool = False) -> str:
        """
        Strip hoistable elements from a fragment.

        Args:
            html: Card HTML fragment
            libraries_only: Only harvest external references; inline scripts stay put

        Returns:
            The re-serialized fragment if anything was removed, else the input unchanged
        """
        if not html:
            return html

        soup = BeautifulSoup(html, MARKUP_PARSER)
        modified = False

        for link in soup.find_all("link", rel="stylesheet"):
            href = link.get("href")
            if not href:
                continue
            if self.registry.claim(href):
                self.document.append_stylesheet(href)
                logger.debug("Hoisted stylesheet %s", href)
            link.decompose()
            modified = True

        for script in soup.find_all("script"):
            src = script.get("src")
            if src:
                # defer/async/onload keep dependent libraries in load order
                if self.registry.claim(src):
                    self.document.append_script(
                        src,
                        defer=script.has_attr("defer"),
                        is_async=script.has_attr("async"),
                        onload=script.get("onload"),
                    )
                    logger.debug("Hoisted script %s", src)
                script.decompose()
                modified = True
            elif not libraries_only:
                content = script.string or ""
                if content.strip():
                    self.deferred.add(content)
                script.decompose()
                modified = True

        return str(soup) if modified else html

    def preload_libraries(self, models: Iterable[NoteModel]) -> None:
        """Hoist the external libraries of every template without touching inline code."""
        for model in models:
            for template in model.tmpls:
                self.hoist(template.qfmt, libraries_only=True)
                self.hoist(template.afmt, libraries_only=True)
