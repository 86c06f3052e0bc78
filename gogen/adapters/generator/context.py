"""
Generator context — default ``Context`` used by ``execute()``.

Holds the discovered packages and naming systems, and writes what the
selected generation packages produce:

    <output_base>/<package.path>/<file.path>  =  package.header + file.content

Writes are atomic (temp file in the target directory, then rename).
In verify mode nothing is written: every file that is missing or
differs is collected and reported in one ``VerificationError``.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from gogen.adapters.base import (
    Context,
    DiscoveryBuilder,
    GenerationPackage,
    Namer,
    NameSystems,
)
from gogen.core.errors import VerificationError
from gogen.core.models.package import Package

logger = logging.getLogger(__name__)


class GeneratorContext(Context):
    """Parsed packages plus naming systems for one run.

    Construction fails with ``ValueError`` when ``default_system`` is not
    a key of ``name_systems``, so a misnamed default surfaces as a
    ContextError from ``execute()`` instead of a KeyError mid-generation.
    """

    def __init__(
        self,
        builder: DiscoveryBuilder,
        name_systems: NameSystems,
        default_system: str,
    ):
        if default_system not in name_systems:
            known = ", ".join(sorted(name_systems)) or "none"
            raise ValueError(
                f"default naming system {default_system!r} not registered (known: {known})"
            )
        self.universe: dict[str, Package] = builder.packages()
        self.namers: dict[str, Namer] = dict(name_systems)
        self.default_system = default_system
        self.verify = False

    def namer(self, name: str | None = None) -> Namer:
        """Look up a naming system; the default one when ``name`` is None."""
        key = self.default_system if name is None else name
        try:
            return self.namers[key]
        except KeyError:
            raise KeyError(f"unknown naming system {key!r}") from None

    def execute_packages(self, output_base: str, packages: Sequence[GenerationPackage]) -> None:
        mismatches: list[str] = []

        for package in packages:
            out_dir = Path(output_base) / package.path
            for generated in package.generate(self):
                target = out_dir / generated.path
                data = package.header + generated.content.encode("utf-8")

                if self.verify:
                    if not target.is_file() or target.read_bytes() != data:
                        mismatches.append(str(target))
                    continue

                _write_atomic(target, data)
                logger.info("Wrote %s", target)

        if mismatches:
            raise VerificationError(mismatches)


def _write_atomic(path: Path, data: bytes) -> None:
    """Write via temp file + rename so a crash never leaves a half-written file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    os.close(fd)
    tmp = Path(tmp_path)
    try:
        tmp.write_bytes(data)
        tmp.replace(path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
