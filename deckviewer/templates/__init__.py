"""Card template substitution and the viewer page shell."""

from .engine import CardSides, apply_template, build_context, render_sides
from .page import PageTemplates

__all__ = [
    'CardSides',
    'apply_template',
    'build_context',
    'render_sides',
    'PageTemplates',
]
