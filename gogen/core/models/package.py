"""
Package model — a Go package found by the discovery builder.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Package(BaseModel):
    """A discovered package.

    Attributes:
        path:  Import path as it was registered (e.g. ``k8s.io/api/core/v1``).
        dir:   Directory on disk the package was read from.
        files: Go file names kept after test-file and build-tag filtering.
    """

    path: str
    dir: str = ""
    files: list[str] = Field(default_factory=list)

    @property
    def name(self) -> str:
        """Last segment of the import path."""
        return self.path.rstrip("/").rsplit("/", 1)[-1]
