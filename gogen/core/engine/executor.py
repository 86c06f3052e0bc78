"""
Engine executor — drives one generation run from arguments to output.

Flow:
    flags → discovery builder → context → verify mode → package selection → execution

Stages run strictly in order. The first failure raises and ends the
run; nothing is retried or rolled back. Writing happens only in the
last stage, inside the context.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from gogen.core.errors import ContextError, ExecutionError
from gogen.core.flags import parse_flags
from gogen.core.inputs import new_builder
from gogen.core.observability.logging_config import setup_logging_from_env

if TYPE_CHECKING:
    from gogen.adapters.base import (
        Context,
        ContextFactory,
        GenerationPackage,
        NameSystems,
    )
    from gogen.core.args import GeneratorArgs

logger = logging.getLogger(__name__)

PackagesFunc = Callable[["Context", "GeneratorArgs"], Sequence["GenerationPackage"]]


def execute(
    args: GeneratorArgs,
    name_systems: NameSystems,
    default_system: str,
    packages: PackagesFunc,
    *,
    context_factory: ContextFactory | None = None,
    argv: Sequence[str] | None = None,
) -> None:
    """Run a generator.

    If you don't need any non-default behavior, use as:

        GeneratorArgs.default().execute(name_systems, "public", packages)

    Args:
        args: Generator arguments. Not modified after the flag stage.
        name_systems: Naming systems by logical name.
        default_system: Name of the naming system used by default.
        packages: Selection function ``(context, args) → generation packages``.
            The only customization point: it decides what gets generated.
        context_factory: Context constructor. Defaults to ``GeneratorContext``.
        argv: Command line for the flag stage. Defaults to the process's.

    Raises:
        DiscoveryError: An input directory could not be registered.
        ContextError: The context could not be constructed.
        ExecutionError: Generation or writing failed.
    """
    # ── Flags ────────────────────────────────────────────────────
    if args.default_command_line_flags:
        setup_logging_from_env()
        parse_flags(args, argv)

    # ── Discovery ────────────────────────────────────────────────
    builder = new_builder(args)
    logger.info("Registered %d input spec(s)", len(args.input_dirs))

    # ── Context ──────────────────────────────────────────────────
    if context_factory is None:
        from gogen.adapters.generator.context import GeneratorContext

        context_factory = GeneratorContext

    try:
        context = context_factory(builder, name_systems, default_system)
    except Exception as e:
        raise ContextError(f"failed making a context: {e}") from e

    context.verify = args.verify_only

    # ── Selection ────────────────────────────────────────────────
    selected = list(packages(context, args))
    logger.info(
        "%s %d package(s) under %s",
        "Verifying" if args.verify_only else "Generating",
        len(selected),
        args.output_base,
    )

    # ── Execution ────────────────────────────────────────────────
    try:
        context.execute_packages(args.output_base, selected)
    except Exception as e:
        raise ExecutionError(f"failed executing generator: {e}") from e
