"""
Boilerplate header assembly.

The header file is plain text. Every literal ``YEAR`` becomes the
current UTC year; when a generated-by template is configured, a
"Code generated by ..." line is appended below a non-empty header.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gogen.core.args import GeneratorArgs

logger = logging.getLogger(__name__)

YEAR_TOKEN = b"YEAR"
GENERATOR_NAME_TOKEN = "GENERATOR_NAME"


def load_go_boilerplate(args: GeneratorArgs, generator_name: str | None = None) -> bytes:
    """Load the header file named by ``args.go_header_file_path``.

    Args:
        args: Generator arguments.
        generator_name: Name substituted for GENERATOR_NAME in the
            generated-by template. Defaults to ``args.generator_name``,
            then to the base name of ``sys.argv[0]``.

    Returns:
        Header bytes ready to prefix generated files.

    Raises:
        OSError: The header file cannot be read. Not wrapped.
    """
    content = Path(args.go_header_file_path).read_bytes()
    year = str(datetime.now(UTC).year).encode("ascii")
    content = content.replace(YEAR_TOKEN, year)

    template = args.generated_by_comment_template
    if template and content:
        name = generator_name
        if name is None:
            name = args.generator_name or Path(sys.argv[0]).name
        comment = template.replace(GENERATOR_NAME_TOKEN, name)
        content += b"\n" + f"{comment}\n\n".encode("utf-8")

    logger.debug(
        "Loaded boilerplate from %s (%d bytes)", args.go_header_file_path, len(content)
    )
    return content
