"""
Error kinds raised by the generation driver.

Every stage of a run either completes or raises one of these, chained
to the underlying cause. Header-file read failures are the exception:
they surface as the original ``OSError``.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all driver failures."""


class DiscoveryError(GeneratorError):
    """An input directory could not be registered with the discovery builder."""


class ContextError(GeneratorError):
    """The generation context could not be constructed."""


class ExecutionError(GeneratorError):
    """Generating or writing the selected packages failed."""


class VerificationError(GeneratorError):
    """Verify-only run found output that differs from what would be generated."""

    def __init__(self, mismatches: list[str]):
        self.mismatches = list(mismatches)
        listing = ", ".join(self.mismatches)
        super().__init__(f"{len(self.mismatches)} generated file(s) out of date: {listing}")
