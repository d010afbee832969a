"""
Application layer - Use cases and orchestration.

This layer contains the registry, the loading engine and the container facade.
It depends only on the Domain layer.
"""

from .container import BeanContainer
from .engine import ResolutionEngine
from .registry import DefinitionRegistry, extract_field_specs
from .value_store import DictValueStore

__all__ = [
    "BeanContainer",
    "DefinitionRegistry",
    "DictValueStore",
    "ResolutionEngine",
    "extract_field_specs",
]
