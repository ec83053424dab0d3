"""Card rendering: page document, resource hoisting, flip state, orchestration."""

from .card_state import CardSide, FlipState, RenderedCard, toggle
from .document import PageDocument
from .hoister import ResourceHoister
from .orchestrator import CardRenderer

__all__ = [
    'CardSide',
    'FlipState',
    'RenderedCard',
    'toggle',
    'PageDocument',
    'ResourceHoister',
    'CardRenderer',
]
