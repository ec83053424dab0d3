"""Front/back flip state of a templated card."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bs4 import Tag

from ..templates import PageTemplates


class CardSide(str, Enum):
    FRONT = "front"
    BACK = "back"


def toggle(side: CardSide) -> CardSide:
    """front -> back -> front. No other transitions."""
    return CardSide.BACK if side is CardSide.FRONT else CardSide.FRONT


def _set_visible(panel: Optional[Tag], visible: bool) -> None:
    if panel is None:
        return
    if visible:
        if panel.has_attr("style"):
            del panel["style"]
    else:
        panel["style"] = "display:none"


class FlipState:
    """
    Binds the two-state machine to a card's element tree.

    Always starts on the front. ``click`` is the only way to change side.
    """

    def __init__(self, card: Tag, front: Optional[Tag], back: Optional[Tag], hint: Tag):
        self.card = card
        self.front = front
        self.back = back
        self.hint = hint
        self.side = CardSide.FRONT
        self._apply()

    def click(self) -> CardSide:
        self.side = toggle(self.side)
        self._apply()
        return self.side

    def _apply(self) -> None:
        showing_front = self.side is CardSide.FRONT
        _set_visible(self.front, showing_front)
        _set_visible(self.back, not showing_front)
        self.hint.string = PageTemplates.HINT_SHOW_ANSWER if showing_front else PageTemplates.HINT_SHOW_QUESTION
        self.card["data-side"] = self.side.value


@dataclass
class RenderedCard:
    """A card's element tree; templated cards also carry their flip state."""

    element: Tag
    flip: Optional[FlipState] = None

    @property
    def templated(self) -> bool:
        return self.flip is not None
