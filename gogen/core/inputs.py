"""
Input resolution — from ``input_dirs`` to a discovery request, and back.

``new_builder`` turns each input spec into a discovery call:

    k8s.io/api/core/v1       add_dir("k8s.io/api/core/v1")
    k8s.io/api/...           add_dir_recursive("k8s.io/api")

``input_includes`` answers whether a discovered package sits under one
of the configured roots. It is a raw string-prefix test: root ``foo``
also matches ``foobar``. Generators rely on that looseness today.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from gogen.core.errors import DiscoveryError

if TYPE_CHECKING:
    from gogen.adapters.base import DiscoveryBuilder
    from gogen.core.args import GeneratorArgs
    from gogen.core.models.package import Package

logger = logging.getLogger(__name__)

RECURSIVE_SUFFIX = "/..."
VENDOR_PREFIX = "./vendor/"


def new_builder(
    args: GeneratorArgs,
    builder_factory: Callable[[], DiscoveryBuilder] | None = None,
) -> DiscoveryBuilder:
    """Make a discovery builder and register every input directory.

    Args:
        args: Generator arguments.
        builder_factory: Builder constructor. Defaults to the filesystem
            ``Builder``.

    Returns:
        The populated builder.

    Raises:
        DiscoveryError: The first input directory that cannot be added.
    """
    if builder_factory is None:
        from gogen.adapters.parser.builder import Builder

        builder_factory = Builder

    builder = builder_factory()
    builder.include_test_files = args.include_test_file

    # Skip files produced by earlier runs of this generator.
    builder.add_build_tags(args.generated_build_tag)

    for spec in args.input_dirs:
        try:
            if spec.endswith(RECURSIVE_SUFFIX):
                builder.add_dir_recursive(spec[: -len(RECURSIVE_SUFFIX)])
            else:
                builder.add_dir(spec)
        except Exception as e:
            raise DiscoveryError(f"unable to add directory {spec!r}: {e}") from e
        logger.debug("Registered input %s", spec)

    return builder


def input_includes(args: GeneratorArgs, package: Package) -> bool:
    """Whether ``package`` is a (sub)package of one of the input directories."""
    for spec in args.input_dirs:
        root = spec
        if root.endswith("..."):
            root = root[: -len("...")]
        if root.startswith(VENDOR_PREFIX):
            root = root[len(VENDOR_PREFIX):]
        if package.path.startswith(root):
            return True
    return False
