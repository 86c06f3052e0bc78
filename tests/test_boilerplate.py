"""
Tests for boilerplate header assembly.
"""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from gogen.core.args import GeneratorArgs
from gogen.core.boilerplate import load_go_boilerplate
from gogen.core.errors import GeneratorError


def _args(header: Path, template: str = "") -> GeneratorArgs:
    return GeneratorArgs(
        go_header_file_path=str(header),
        generated_by_comment_template=template,
    )


def _year() -> bytes:
    return str(datetime.now(UTC).year).encode()


class TestYearSubstitution:
    def test_header_without_year_unchanged(self, header_file: Path):
        assert load_go_boilerplate(_args(header_file)) == header_file.read_bytes()

    def test_every_year_replaced(self, tmp_path: Path):
        header = tmp_path / "h.txt"
        header.write_bytes(b"// Copyright YEAR.\n// (c) YEAR-YEAR\n")
        out = load_go_boilerplate(_args(header))
        year = _year()
        assert out == b"// Copyright " + year + b".\n// (c) " + year + b"-" + year + b"\n"
        assert b"YEAR" not in out
        assert len(year) == 4

    def test_idempotent(self, header_file: Path, tmp_path: Path):
        first = load_go_boilerplate(_args(header_file))
        again = tmp_path / "again.txt"
        again.write_bytes(first)
        assert load_go_boilerplate(_args(again)) == first


class TestGeneratedBy:
    def test_comment_appended(self, tmp_path: Path):
        header = tmp_path / "h.txt"
        header.write_bytes(b"// Copyright YEAR The Authors.\n")
        args = _args(header, "// Code generated by GENERATOR_NAME. DO NOT EDIT.")
        out = load_go_boilerplate(args, "deepcopy-gen")
        assert out == (
            b"// Copyright " + _year() + b" The Authors.\n"
            b"\n"
            b"// Code generated by deepcopy-gen. DO NOT EDIT.\n"
            b"\n"
        )

    def test_every_placeholder_replaced(self, header_file: Path):
        args = _args(header_file, "// GENERATOR_NAME / GENERATOR_NAME")
        out = load_go_boilerplate(args, "gen")
        assert out.endswith(b"\n// gen / gen\n\n")

    def test_empty_template_not_appended(self, header_file: Path):
        out = load_go_boilerplate(_args(header_file, ""), "gen")
        assert out == header_file.read_bytes()

    def test_empty_header_gets_no_comment(self, tmp_path: Path):
        header = tmp_path / "empty.txt"
        header.write_bytes(b"")
        args = _args(header, "// Code generated by GENERATOR_NAME. DO NOT EDIT.")
        assert load_go_boilerplate(args, "gen") == b""

    def test_generator_name_from_args(self, header_file: Path):
        args = _args(header_file, "// by GENERATOR_NAME")
        args.generator_name = "client-gen"
        assert load_go_boilerplate(args).endswith(b"// by client-gen\n\n")

    def test_explicit_name_wins(self, header_file: Path):
        args = _args(header_file, "// by GENERATOR_NAME")
        args.generator_name = "client-gen"
        assert args.load_go_boilerplate("lister-gen").endswith(b"// by lister-gen\n\n")

    def test_program_name_without_flag_parsing(self, header_file: Path, monkeypatch):
        monkeypatch.setattr("sys.argv", ["/usr/local/bin/deepcopy-gen"])
        args = _args(header_file, "// Code generated by GENERATOR_NAME. DO NOT EDIT.")
        args.without_default_flag_parsing()
        out = args.load_go_boilerplate()
        assert out.endswith(b"// Code generated by deepcopy-gen. DO NOT EDIT.\n\n")

    def test_empty_explicit_name_kept(self, header_file: Path, monkeypatch):
        monkeypatch.setattr("sys.argv", ["deepcopy-gen"])
        args = _args(header_file, "// by GENERATOR_NAME.")
        assert load_go_boilerplate(args, "").endswith(b"// by .\n\n")


class TestErrors:
    def test_missing_file_raises_oserror(self, tmp_path: Path):
        args = _args(tmp_path / "missing.txt")
        with pytest.raises(FileNotFoundError):
            load_go_boilerplate(args)

    def test_not_wrapped(self, tmp_path: Path):
        args = _args(tmp_path / "missing.txt")
        with pytest.raises(OSError) as exc:
            args.load_go_boilerplate()
        assert not isinstance(exc.value, GeneratorError)
