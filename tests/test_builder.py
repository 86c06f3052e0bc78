"""
Tests for the filesystem discovery builder.
"""

from pathlib import Path

import pytest

from gogen.adapters.parser.builder import Builder
from gogen.core.args import GeneratorArgs
from gogen.core.inputs import input_includes


def _src(go_path: Path) -> Path:
    return go_path / "src"


class TestAddDir:
    def test_finds_package(self, go_path: Path):
        builder = Builder(source_roots=[_src(go_path)])
        builder.add_dir("example.com/foo")
        pkg = builder.packages()["example.com/foo"]
        assert pkg.name == "foo"
        assert pkg.dir == str(_src(go_path) / "example.com" / "foo")

    def test_default_roots_use_gopath(self, go_path: Path):
        builder = Builder()
        builder.add_dir("example.com/foo")
        assert builder.find_packages() == ["example.com/foo"]

    def test_only_go_files(self, go_path: Path):
        builder = Builder(source_roots=[_src(go_path)])
        builder.add_dir("example.com/foo")
        files = builder.packages()["example.com/foo"].files
        assert "README.md" not in files
        assert "foo.go" in files

    def test_test_files_excluded_by_default(self, go_path: Path):
        builder = Builder(source_roots=[_src(go_path)])
        builder.add_dir("example.com/foo")
        assert "foo_test.go" not in builder.packages()["example.com/foo"].files

    def test_test_files_included(self, go_path: Path):
        builder = Builder(source_roots=[_src(go_path)])
        builder.include_test_files = True
        builder.add_dir("example.com/foo")
        assert "foo_test.go" in builder.packages()["example.com/foo"].files

    def test_tagged_file_skipped(self, go_path: Path):
        builder = Builder(source_roots=[_src(go_path)])
        builder.add_build_tags("ignore_autogenerated")
        builder.add_dir("example.com/foo")
        assert builder.packages()["example.com/foo"].files == ["foo.go"]

    def test_tagged_file_kept_without_tag(self, go_path: Path):
        builder = Builder(source_roots=[_src(go_path)])
        builder.add_dir("example.com/foo")
        assert "zz_generated.deepcopy.go" in builder.packages()["example.com/foo"].files

    def test_constraint_after_package_clause_ignored(self, tmp_path: Path):
        pkg = tmp_path / "late"
        pkg.mkdir()
        (pkg / "late.go").write_text("package late\n\n// +build ignore_autogenerated\n")
        builder = Builder(source_roots=[tmp_path])
        builder.add_build_tags("ignore_autogenerated")
        builder.add_dir("late")
        assert builder.packages()["late"].files == ["late.go"]

    def test_explicit_relative_path(self, go_path: Path, monkeypatch):
        monkeypatch.chdir(_src(go_path))
        builder = Builder(source_roots=[])
        builder.add_dir("./example.com/foo")
        assert "./example.com/foo" in builder.packages()

    def test_missing_directory(self, tmp_path: Path):
        builder = Builder(source_roots=[tmp_path])
        with pytest.raises(FileNotFoundError):
            builder.add_dir("example.com/missing")

    def test_empty_tag_ignored(self):
        builder = Builder(source_roots=[])
        builder.add_build_tags("", "a")
        assert builder.ignored_tags == frozenset({"a"})


class TestAddDirRecursive:
    def test_registers_subpackages(self, go_path: Path):
        builder = Builder(source_roots=[_src(go_path)])
        builder.add_dir_recursive("example.com/foo")
        assert builder.find_packages() == ["example.com/foo", "example.com/foo/bar"]

    def test_subpackage_files(self, go_path: Path):
        builder = Builder(source_roots=[_src(go_path)])
        builder.add_dir_recursive("example.com/foo")
        assert builder.packages()["example.com/foo/bar"].files == ["bar.go"]

    def test_missing_root(self, tmp_path: Path):
        builder = Builder(source_roots=[tmp_path])
        with pytest.raises(FileNotFoundError):
            builder.add_dir_recursive("nowhere")


class TestVendoredInputs:
    @pytest.fixture
    def vendored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
        core = tmp_path / "vendor" / "k8s.io" / "api" / "core"
        core.mkdir(parents=True)
        (core / "a.go").write_text("package core\n")
        monkeypatch.chdir(tmp_path)
        return tmp_path

    def test_registered_without_vendor_prefix(self, vendored: Path):
        builder = Builder(source_roots=[vendored])
        builder.add_dir_recursive("./vendor/k8s.io/api")
        assert builder.find_packages() == ["k8s.io/api", "k8s.io/api/core"]
        assert builder.packages()["k8s.io/api/core"].files == ["a.go"]

    def test_bare_vendor_prefix_stripped(self, vendored: Path):
        builder = Builder(source_roots=[vendored])
        builder.add_dir("vendor/k8s.io/api/core")
        assert builder.find_packages() == ["k8s.io/api/core"]

    def test_included_by_their_input(self, vendored: Path):
        args = GeneratorArgs(input_dirs=["./vendor/k8s.io/api/..."])
        builder = Builder(source_roots=[vendored])
        builder.add_dir_recursive("./vendor/k8s.io/api")
        assert all(input_includes(args, pkg) for pkg in builder.packages().values())
