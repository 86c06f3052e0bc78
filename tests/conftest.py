"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def header_file(tmp_path: Path) -> Path:
    """A boilerplate header without the YEAR token."""
    path = tmp_path / "boilerplate.go.txt"
    path.write_text("/*\nCopyright The Example Authors.\n*/\n")
    return path


@pytest.fixture
def go_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A GOPATH with one package tree, set in the environment.

    Layout under $GOPATH/src/example.com/foo:
        foo.go, foo_test.go, zz_generated.deepcopy.go (tagged)
        bar/bar.go
        testdata/data.go, _skip/skip.go, .hidden/hidden.go
    """
    gopath = tmp_path / "go"
    pkg = gopath / "src" / "example.com" / "foo"
    (pkg / "bar").mkdir(parents=True)
    (pkg / "testdata").mkdir()
    (pkg / "_skip").mkdir()
    (pkg / ".hidden").mkdir()

    (pkg / "foo.go").write_text("package foo\n")
    (pkg / "foo_test.go").write_text("package foo\n")
    (pkg / "zz_generated.deepcopy.go").write_text(textwrap.dedent("""\
        //go:build !ignore_autogenerated
        // +build !ignore_autogenerated

        package foo
    """))
    (pkg / "README.md").write_text("not go\n")
    (pkg / "bar" / "bar.go").write_text("package bar\n")
    (pkg / "testdata" / "data.go").write_text("package testdata\n")
    (pkg / "_skip" / "skip.go").write_text("package skip\n")
    (pkg / ".hidden" / "hidden.go").write_text("package hidden\n")

    monkeypatch.setenv("GOPATH", str(gopath))
    return gopath
