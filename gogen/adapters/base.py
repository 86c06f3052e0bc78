"""
Collaborator contracts — what the driver needs from the outside world.

The driver never parses Go code, resolves types, or renders templates.
It talks to four collaborators through these interfaces:

    DiscoveryBuilder   walks input directories into a package graph
    Context            holds parsed packages and naming systems, runs generation
    Namer              derives identifiers from types
    GenerationPackage  a caller-defined unit of output

Default implementations live in ``gogen.adapters.parser`` and
``gogen.adapters.generator``; test doubles in ``gogen.adapters.mock``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from gogen.core.models.package import Package
from gogen.core.models.template import GeneratedFile


class DiscoveryBuilder(ABC):
    """Registers input directories for package discovery.

    ``add_dir`` and ``add_dir_recursive`` raise on an unusable directory;
    the driver wraps the failure with the offending input.
    """

    include_test_files: bool = False

    @abstractmethod
    def add_build_tags(self, *tags: str) -> None:
        """Skip files carrying any of these build tags."""

    @abstractmethod
    def add_dir(self, path: str) -> None:
        """Register a single package directory."""

    @abstractmethod
    def add_dir_recursive(self, path: str) -> None:
        """Register a directory and every package below it."""

    @abstractmethod
    def packages(self) -> dict[str, Package]:
        """All registered packages, keyed by import path."""


class Namer(ABC):
    """A naming system: turns a type into an identifier."""

    @abstractmethod
    def name(self, t: Any) -> str:
        """Identifier for ``t`` in this naming system."""


NameSystems = Mapping[str, Namer]


class Context(ABC):
    """Generation context handed to the package-selection callback.

    ``verify`` is set by the driver before selection runs. When true,
    ``execute_packages`` must compare instead of write.
    """

    verify: bool = False

    @abstractmethod
    def execute_packages(self, output_base: str, packages: Sequence[GenerationPackage]) -> None:
        """Generate every package under ``output_base``. Raises on failure."""


class GenerationPackage(ABC):
    """A unit of generated output, produced by the caller's selection function."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Output package path, relative to the output base."""

    @property
    def header(self) -> bytes:
        """Bytes prepended to every generated file (usually the boilerplate)."""
        return b""

    @abstractmethod
    def generate(self, context: Context) -> list[GeneratedFile]:
        """Produce this package's files."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} path={self.path!r}>"


ContextFactory = Callable[[DiscoveryBuilder, NameSystems, str], Context]
