"""
Command-line flags for generator arguments.

Two halves, kept apart so the driver can be tested without a process
argument vector:

    flag_options(args)              pure: option specs seeded from args
    parse_flags(args, argv, name)   effectful: parse argv, write back to args

Flags mirror the upstream gengo generators: -i, -o, -p, -O, -H,
--verify-only, --build-tag.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from gogen.core.args import GeneratorArgs

logger = logging.getLogger(__name__)

# click parameter name → GeneratorArgs field
_FIELD_FOR_PARAM: dict[str, str] = {
    "input_dirs": "input_dirs",
    "output_base": "output_base",
    "output_package": "output_package_path",
    "output_file_base": "output_file_base_name",
    "go_header_file": "go_header_file_path",
    "verify_only": "verify_only",
    "build_tag": "generated_build_tag",
}


def _split_comma_separated(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> list[str]:
    """Flatten repeated ``-i a,b -i c`` into ``[a, b, c]``."""
    return [part for item in value for part in item.split(",") if part]


def flag_options(args: GeneratorArgs) -> list[click.Option]:
    """Build the option list, each default bound to the current value in ``args``."""
    return [
        click.Option(
            ["--input-dirs", "-i", "input_dirs"],
            multiple=True,
            default=tuple(args.input_dirs),
            callback=_split_comma_separated,
            help="Comma-separated list of import paths to get input types from.",
        ),
        click.Option(
            ["--output-base", "-o", "output_base"],
            default=args.output_base,
            show_default=True,
            help="Output base; defaults to $GOPATH/src/ or ./ if $GOPATH is not set.",
        ),
        click.Option(
            ["--output-package", "-p", "output_package"],
            default=args.output_package_path,
            help="Base package path.",
        ),
        click.Option(
            ["--output-file-base", "-O", "output_file_base"],
            default=args.output_file_base_name,
            help="Base name (without .go suffix) for output files.",
        ),
        click.Option(
            ["--go-header-file", "-H", "go_header_file"],
            default=args.go_header_file_path,
            show_default=True,
            help=(
                "File containing boilerplate header text. "
                "The string YEAR will be replaced with the current 4-digit year."
            ),
        ),
        click.Option(
            ["--verify-only/--no-verify-only", "verify_only"],
            default=args.verify_only,
            help="If set, only verify existing output, do not write anything.",
        ),
        click.Option(
            ["--build-tag", "build_tag"],
            default=args.generated_build_tag,
            show_default=True,
            help="A Go build tag to use to identify files generated by this command. Should be unique.",
        ),
    ]


def add_flags(args: GeneratorArgs, command: click.Command) -> None:
    """Append the generator options to ``command``."""
    command.params.extend(flag_options(args))


def apply_flags(args: GeneratorArgs, params: Mapping[str, Any]) -> None:
    """Copy parsed option values onto ``args``. Unknown keys are ignored."""
    for param_name, field_name in _FIELD_FOR_PARAM.items():
        if param_name not in params:
            continue
        value = params[param_name]
        if field_name == "input_dirs":
            value = list(value)
        setattr(args, field_name, value)


def parse_flags(
    args: GeneratorArgs,
    argv: Sequence[str] | None = None,
    prog_name: str | None = None,
) -> None:
    """Parse ``argv`` into ``args``, exiting the process on a usage error.

    Defaults to the process command line. ``--help`` prints usage and
    exits 0. The program name also becomes ``args.generator_name`` unless
    one is already set.
    """
    if argv is None:
        argv = sys.argv[1:]
    if prog_name is None:
        prog_name = Path(sys.argv[0]).name

    command = click.Command(prog_name, help=f"Run the {prog_name} code generator.")
    add_flags(args, command)

    try:
        ctx = command.make_context(prog_name, list(argv))
    except click.exceptions.Exit as e:
        sys.exit(e.exit_code)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    apply_flags(args, ctx.params)
    if not args.generator_name:
        args.generator_name = prog_name

    logger.debug("Parsed flags for %s: %s", prog_name, ctx.params)
