"""
Generator arguments — the configuration of one generation run.

A ``GeneratorArgs`` is built with defaults, optionally updated from the
command line or a ``gogen.yml``, then handed to ``execute()`` exactly
once. Typical generator entry point:

    GeneratorArgs.default().execute(name_systems, "public", packages)

Nothing is validated at construction time: a bad header path or input
directory surfaces when the run reaches the stage that uses it.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

if TYPE_CHECKING:
    import click

    from gogen.adapters.base import ContextFactory, DiscoveryBuilder, NameSystems
    from gogen.core.engine.executor import PackagesFunc
    from gogen.core.models.package import Package

CustomArgsT = TypeVar("CustomArgsT")

# Header file location below the source tree. Path and generated-by text
# follow the gengo conventions.
DEFAULT_HEADER_FILE = "k8s.io/gengo/boilerplate/boilerplate.go.txt"
DEFAULT_BUILD_TAG = "ignore_autogenerated"
DEFAULT_GENERATED_BY_TEMPLATE = "// Code generated by GENERATOR_NAME. DO NOT EDIT."

GOPATH_ENV = "GOPATH"


def default_source_tree() -> str:
    """Return the ``src`` directory of the first GOPATH entry.

    Falls back to ``"./"`` when GOPATH is unset or its first entry is
    empty. Read on every call, never cached.
    """
    paths = os.environ.get(GOPATH_ENV, "").split(os.pathsep)
    if paths and paths[0]:
        return os.path.join(paths[0], "src")
    return "./"


class GeneratorArgs(BaseModel, Generic[CustomArgsT]):
    """Arguments passed to generators.

    Generic over the type of ``custom_args``, the generator-specific
    payload: ``GeneratorArgs[MyOptions].default()``.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    # Which directories to parse. A trailing "/..." means the whole subtree.
    input_dirs: list[str] = Field(default_factory=list)

    # Source tree to write results to.
    output_base: str = ""

    # Package path within the source tree.
    output_package_path: str = ""

    # Output file name, without the .go suffix.
    output_file_base_name: str = ""

    # Where to get the copyright header text.
    go_header_file_path: str = ""

    # Appended below the header when set; GENERATOR_NAME is replaced
    # with the generator's program name.
    generated_by_comment_template: str = ""

    # Only verify existing output, write nothing.
    verify_only: bool = False

    # Include *_test.go files in discovery.
    include_test_file: bool = False

    # Build tag marking files produced by this generator, so they are
    # excluded from discovery. Keep it unique per generator.
    generated_build_tag: str = ""

    # Program name substituted for GENERATOR_NAME.
    generator_name: str = ""

    # Generator-specific arguments.
    custom_args: CustomArgsT | None = None

    _default_command_line_flags: bool = PrivateAttr(default=True)

    @field_validator("input_dirs", mode="before")
    @classmethod
    def split_comma_separated(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [d.strip() for d in value.split(",") if d.strip()]
        return value

    @classmethod
    def default(cls) -> GeneratorArgs[CustomArgsT]:
        """Arguments with computed defaults; change them before ``add_flags``."""
        source_tree = default_source_tree()
        return cls(
            output_base=source_tree,
            go_header_file_path=os.path.join(source_tree, DEFAULT_HEADER_FILE),
            generated_build_tag=DEFAULT_BUILD_TAG,
            generated_by_comment_template=DEFAULT_GENERATED_BY_TEMPLATE,
        )

    @property
    def default_command_line_flags(self) -> bool:
        """Whether ``execute()`` parses the process command line."""
        return self._default_command_line_flags

    def without_default_flag_parsing(self) -> GeneratorArgs[CustomArgsT]:
        """Disable implicit flag registration and parsing in ``execute()``."""
        self._default_command_line_flags = False
        return self

    def add_flags(self, command: click.Command) -> None:
        """Register every argument as an option on a click command."""
        from gogen.core.flags import add_flags

        add_flags(self, command)

    def load_go_boilerplate(self, generator_name: str | None = None) -> bytes:
        """Load the header file passed to ``--go-header-file``."""
        from gogen.core.boilerplate import load_go_boilerplate

        return load_go_boilerplate(self, generator_name)

    def new_builder(self) -> DiscoveryBuilder:
        """Make a discovery builder populated with the input directories."""
        from gogen.core.inputs import new_builder

        return new_builder(self)

    def input_includes(self, package: Package) -> bool:
        """Whether ``package`` is a (sub)package of one of the input directories."""
        from gogen.core.inputs import input_includes

        return input_includes(self, package)

    def execute(
        self,
        name_systems: NameSystems,
        default_system: str,
        packages: PackagesFunc,
        *,
        context_factory: ContextFactory | None = None,
        argv: Sequence[str] | None = None,
    ) -> None:
        """Run the generator. See ``gogen.core.engine.executor.execute``."""
        from gogen.core.engine.executor import execute

        execute(
            self,
            name_systems,
            default_system,
            packages,
            context_factory=context_factory,
            argv=argv,
        )
