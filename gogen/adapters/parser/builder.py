"""
Filesystem discovery builder — finds Go packages on disk.

Resolves import paths to directories and records which Go files each
package would compile with: ``*_test.go`` only on request, and never a
file whose build constraint names an ignored tag (that is how output of
earlier generator runs is kept out of the input).

No Go syntax is parsed beyond the build-constraint comments above the
``package`` clause.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from gogen.adapters.base import DiscoveryBuilder
from gogen.core.args import default_source_tree
from gogen.core.models.package import Package

logger = logging.getLogger(__name__)

_CONSTRAINT_RE = re.compile(r"^//\s*(?:\+build|go:build)\s+(.*)$")
_TAG_RE = re.compile(r"[\w.]+")

# Directories the go tool never treats as packages
_SKIP_DIRS = frozenset({"testdata", "vendor"})

# Vendored packages are registered under their own import path
_VENDOR_PREFIXES = ("./vendor/", "vendor/")


class Builder(DiscoveryBuilder):
    """Registers Go package directories by import path.

    Import paths that are absolute or start with ``.`` are used as
    filesystem paths. Anything else is looked up below each source root
    in order: by default the GOPATH source tree, then the working
    directory.
    """

    def __init__(self, source_roots: Sequence[str | Path] | None = None):
        if source_roots is None:
            source_roots = [default_source_tree(), "."]
        self._source_roots = [Path(r) for r in source_roots]
        self._ignored_tags: set[str] = set()
        self._packages: dict[str, Package] = {}
        self.include_test_files = False

    @property
    def ignored_tags(self) -> frozenset[str]:
        return frozenset(self._ignored_tags)

    def add_build_tags(self, *tags: str) -> None:
        self._ignored_tags.update(t for t in tags if t)

    def add_dir(self, path: str) -> None:
        directory = self._resolve(path)
        self._register(path, directory)

    def add_dir_recursive(self, path: str) -> None:
        root = self._resolve(path)
        self._register(path, root)

        for current, dirs, _files in os.walk(root):
            dirs[:] = sorted(d for d in dirs if not _skip_dir(d))
            for d in dirs:
                sub = Path(current) / d
                rel = sub.relative_to(root).as_posix()
                self._register(f"{path.rstrip('/')}/{rel}", sub)

    def packages(self) -> dict[str, Package]:
        return dict(self._packages)

    def find_packages(self) -> list[str]:
        """Import paths of every registered package, sorted."""
        return sorted(self._packages)

    # ── Internals ────────────────────────────────────────────────

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute() or path.startswith("."):
            if candidate.is_dir():
                return candidate
        else:
            for root in self._source_roots:
                found = root / path
                if found.is_dir():
                    return found
        raise FileNotFoundError(f"cannot find package directory for {path!r}")

    def _register(self, import_path: str, directory: Path) -> None:
        import_path = _strip_vendor(import_path)
        files = sorted(self._go_files(directory.iterdir()))
        self._packages[import_path] = Package(
            path=import_path, dir=str(directory), files=files
        )
        logger.debug("Found package %s (%d files) in %s", import_path, len(files), directory)

    def _go_files(self, entries: Iterable[Path]) -> Iterable[str]:
        for entry in entries:
            if not entry.is_file() or entry.suffix != ".go":
                continue
            if entry.name.endswith("_test.go") and not self.include_test_files:
                continue
            if self._ignored_tags and self._has_ignored_tag(entry):
                logger.debug("Skipping %s (ignored build tag)", entry)
                continue
            yield entry.name

    def _has_ignored_tag(self, file: Path) -> bool:
        """Whether a build constraint above the package clause names an ignored tag."""
        with file.open(encoding="utf-8", errors="replace") as f:
            for line in f:
                stripped = line.strip()
                if stripped.startswith("package "):
                    return False
                match = _CONSTRAINT_RE.match(stripped)
                if match and self._ignored_tags.intersection(_TAG_RE.findall(match.group(1))):
                    return True
        return False


def _skip_dir(name: str) -> bool:
    return name in _SKIP_DIRS or name.startswith((".", "_"))


def _strip_vendor(import_path: str) -> str:
    for prefix in _VENDOR_PREFIXES:
        if import_path.startswith(prefix):
            return import_path[len(prefix):]
    return import_path
