"""Per-note rendering: raw field table or templated flip card."""

import logging
from typing import Optional

from bs4 import Tag

from ..models import Note, NoteModel, RenderMode
from ..templates import PageTemplates, build_context, render_sides
from .card_state import FlipState, RenderedCard
from .document import PageDocument
from .hoister import ResourceHoister

logger = logging.getLogger(__name__)


class CardRenderer:
    """Turn notes into card element trees inside the shared page."""

    def __init__(self, document: PageDocument, hoister: ResourceHoister):
        self.document = document
        self.hoister = hoister

    def render_note(self, note: Note, model: Optional[NoteModel], mode: RenderMode) -> RenderedCard:
        """
        Render one note.

        Templated rendering needs both ``model`` mode and a resolved model;
        anything else renders the raw field table.
        """
        if mode is RenderMode.MODEL and model is not None:
            return self.render_templated(note, model)
        if mode is RenderMode.MODEL:
            logger.debug("No model for note %s, rendering raw", note.guid or "<no guid>")
        return self.render_raw(note, model)

    def render_raw(self, note: Note, model: Optional[NoteModel]) -> RenderedCard:
        container = self.document.new_tag("div", class_="card-container")
        raw = self.document.new_tag("div", class_="card-render card-raw")
        table = self.document.new_tag("table")

        names = model.field_names if model is not None else []
        for idx, value in enumerate(note.fields):
            row = self.document.new_tag("tr")
            th = self.document.new_tag("th")
            th.string = names[idx] if idx < len(names) else f"Field {idx + 1}"
            td = self.document.new_tag("td")
            self.document.append_html(td, value)
            row.append(th)
            row.append(td)
            table.append(row)

        raw.append(table)
        container.append(raw)
        self._append_tags(container, note)
        return RenderedCard(element=container)

    def render_templated(self, note: Note, model: NoteModel) -> RenderedCard:
        template = model.first_template
        if template is None:
            logger.debug("Model '%s' has no templates, rendering raw", model.name)
            return self.render_raw(note, model)

        container = self.document.new_tag("div", class_="card-container")
        card_render = self.document.new_tag("div", class_="card-render")

        context = build_context(note, model)
        sides = render_sides(template.qfmt, template.afmt, context)
        combined = PageTemplates.combined_card_html(model.css, sides.front, sides.back)
        combined = self.hoister.hoist(combined)
        self.document.append_html(card_render, combined)

        hint = self.document.new_tag("div", class_="card-flip-hint")
        card_render.append(hint)
        card_render["style"] = "cursor:pointer"
        flip = FlipState(
            card_render,
            front=self._find_face(card_render, "card-front"),
            back=self._find_face(card_render, "card-back"),
            hint=hint,
        )

        container.append(card_render)
        self._append_tags(container, note)
        return RenderedCard(element=container, flip=flip)

    @staticmethod
    def _find_face(card_render: Tag, class_name: str) -> Optional[Tag]:
        face = card_render.find("div", class_=class_name, recursive=False)
        if face is None:
            # Unbalanced template markup can nest the faces
            face = card_render.find("div", class_=class_name)
        return face

    def _append_tags(self, container: Tag, note: Note) -> None:
        if not note.tags:
            return
        bar = self.document.new_tag("div", class_="card-tags")
        for tag in note.tags:
            chip = self.document.new_tag("span", class_="tag")
            chip.string = tag
            bar.append(chip)
        container.append(bar)
