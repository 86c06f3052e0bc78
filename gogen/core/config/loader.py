"""
Configuration loader — reads gogen.yml into GeneratorArgs.

Lets a generator keep its arguments in the repository instead of a
long command line. The file is merged over defaults; command-line flags
still apply on top when ``execute()`` parses them.

    # gogen.yml
    generator:
      input-dirs:
        - k8s.io/api/...
      go-header-file: hack/boilerplate.go.txt
      output-base: .
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gogen.core.args import GeneratorArgs
from gogen.core.errors import GeneratorError

logger = logging.getLogger(__name__)

CONFIG_FILE = "gogen.yml"

# Flag spellings accepted as keys, mapped to GeneratorArgs fields
_KEY_ALIASES: dict[str, str] = {
    "input-dirs": "input_dirs",
    "output-base": "output_base",
    "output-package": "output_package_path",
    "output-file-base": "output_file_base_name",
    "go-header-file": "go_header_file_path",
    "verify-only": "verify_only",
    "build-tag": "generated_build_tag",
    "include-test-files": "include_test_file",
    "generated-by-template": "generated_by_comment_template",
}


class ConfigError(GeneratorError):
    """Raised when gogen.yml is missing or invalid."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for gogen.yml from ``start_dir`` (default: cwd) upward.

    Returns:
        Path to the file, or None if no directory up to the root has one.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_generator_args(path: Path, base: GeneratorArgs | None = None) -> GeneratorArgs:
    """Load generator arguments from a YAML file.

    Args:
        path: Path to the config file.
        base: Arguments the file is merged over. Defaults to
            ``GeneratorArgs.default()``. Not modified.

    Returns:
        A new GeneratorArgs. ``custom_args`` and the flag-parsing
        switch are carried over from ``base``.

    Raises:
        ConfigError: Missing file, invalid YAML, or unknown/invalid keys.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading generator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Settings may sit under a "generator" key or at the top level
    section = data.get("generator", data) if "generator" in data else data
    if not isinstance(section, dict):
        raise ConfigError(f"Expected a mapping under 'generator' in {path}")

    if base is None:
        base = GeneratorArgs.default()

    merged: dict[str, Any] = base.model_dump(exclude={"custom_args"})
    merged.update(_normalize_keys(section))

    try:
        args = type(base).model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid generator configuration in {path}: {e}") from e

    args.custom_args = base.custom_args
    if not base.default_command_line_flags:
        args.without_default_flag_parsing()

    logger.info("Loaded generator config from %s (%d input dir(s))", path, len(args.input_dirs))
    return args


def _normalize_keys(section: dict[str, Any]) -> dict[str, Any]:
    return {_KEY_ALIASES.get(str(k), str(k)): v for k, v in section.items()}
