"""
Mock collaborators — test doubles for the discovery builder and context.

Both record every call so tests can assert on what the driver asked
for, and can be told to fail on demand.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from gogen.adapters.base import (
    Context,
    DiscoveryBuilder,
    GenerationPackage,
    NameSystems,
)
from gogen.core.models.package import Package
from gogen.core.models.template import GeneratedFile


class MockBuilder(DiscoveryBuilder):
    """Discovery builder that only records calls.

    ``calls`` holds ``("add_dir", path)`` / ``("add_dir_recursive", path)``
    tuples in call order.
    """

    def __init__(self) -> None:
        self.include_test_files = False
        self.build_tags: list[str] = []
        self.calls: list[tuple[str, str]] = []
        self._failures: dict[str, str] = {}

    def set_failure(self, path: str, error: str = "Mock discovery failure") -> None:
        """Make ``add_dir``/``add_dir_recursive`` raise for ``path``."""
        self._failures[path] = error

    def add_build_tags(self, *tags: str) -> None:
        self.build_tags.extend(tags)

    def add_dir(self, path: str) -> None:
        self._record("add_dir", path)

    def add_dir_recursive(self, path: str) -> None:
        self._record("add_dir_recursive", path)

    def packages(self) -> dict[str, Package]:
        return {path: Package(path=path) for _, path in self.calls}

    def _record(self, method: str, path: str) -> None:
        if path in self._failures:
            raise FileNotFoundError(self._failures[path])
        self.calls.append((method, path))


@dataclass
class ExecuteCall:
    """One recorded ``execute_packages`` call."""

    output_base: str
    packages: list[GenerationPackage]


class MockContext(Context):
    """Context that records ``execute_packages`` instead of writing."""

    def __init__(
        self,
        builder: DiscoveryBuilder,
        name_systems: NameSystems,
        default_system: str,
        error: str | None = None,
    ):
        self.builder = builder
        self.name_systems = name_systems
        self.default_system = default_system
        self.verify = False
        self.error = error
        self.executions: list[ExecuteCall] = []

    def execute_packages(self, output_base: str, packages: Sequence[GenerationPackage]) -> None:
        self.executions.append(ExecuteCall(output_base=output_base, packages=list(packages)))
        if self.error:
            raise RuntimeError(self.error)


@dataclass
class StaticPackage(GenerationPackage):
    """Generation package with a fixed file list."""

    package_path: str
    files: list[GeneratedFile] = field(default_factory=list)
    header_bytes: bytes = b""

    @property
    def path(self) -> str:
        return self.package_path

    @property
    def header(self) -> bytes:
        return self.header_bytes

    def generate(self, context: Context) -> list[GeneratedFile]:
        return list(self.files)
