"""
Core — the generator argument model and the run driver.

    from gogen.core import GeneratorArgs, default_source_tree
"""

from gogen.core.args import GeneratorArgs, default_source_tree
from gogen.core.errors import (
    ContextError,
    DiscoveryError,
    ExecutionError,
    GeneratorError,
    VerificationError,
)

__all__ = [
    "ContextError",
    "DiscoveryError",
    "ExecutionError",
    "GeneratorArgs",
    "GeneratorError",
    "VerificationError",
    "default_source_tree",
]
