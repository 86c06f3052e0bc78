"""
Generated file model — what a generation package hands back to the context.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by a generation package.

    Attributes:
        path:    Path relative to the package's output directory.
        content: File body, without the package header.
        reason:  Which generator produced it (informational).
    """

    path: str
    content: str
    reason: str = ""
