"""Adapters — the driver's collaborators.

Public re-exports for convenient access.
"""

from gogen.adapters.base import (
    Context,
    ContextFactory,
    DiscoveryBuilder,
    GenerationPackage,
    Namer,
    NameSystems,
)
from gogen.adapters.generator.context import GeneratorContext
from gogen.adapters.mock import MockBuilder, MockContext, StaticPackage
from gogen.adapters.parser.builder import Builder

__all__ = [
    "Builder",
    "Context",
    "ContextFactory",
    "DiscoveryBuilder",
    "GenerationPackage",
    "GeneratorContext",
    "MockBuilder",
    "MockContext",
    "Namer",
    "NameSystems",
    "StaticPackage",
]
