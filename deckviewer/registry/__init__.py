"""Session-scoped registries for models, hoisted resources and deferred scripts."""

from .models import ModelRegistry
from .resources import DeferredScripts, ResourceRegistry

__all__ = ['ModelRegistry', 'ResourceRegistry', 'DeferredScripts']
