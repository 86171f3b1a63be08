"""Tests for application/discovery/sources.py."""

from pathlib import Path

import pytest

from reprcheck.application.discovery.sources import discover_sources


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


class TestDiscoverSources:
    """Tests for discover_sources."""

    def test_recursive_rs_files(self, tmp_path: Path) -> None:
        lib = _touch(tmp_path / "src" / "lib.rs")
        ffi = _touch(tmp_path / "src" / "ffi" / "mod.rs")
        _touch(tmp_path / "README.md")

        assert discover_sources([tmp_path]) == tuple(sorted([lib, ffi]))

    def test_skips_target_and_git(self, tmp_path: Path) -> None:
        lib = _touch(tmp_path / "src" / "lib.rs")
        _touch(tmp_path / "target" / "debug" / "build.rs")
        _touch(tmp_path / ".git" / "hooks" / "x.rs")

        assert discover_sources([tmp_path]) == (lib,)

    def test_explicit_file_kept(self, tmp_path: Path) -> None:
        snippet = _touch(tmp_path / "snippet.txt")
        assert discover_sources([snippet]) == (snippet,)

    def test_deduplicated(self, tmp_path: Path) -> None:
        lib = _touch(tmp_path / "lib.rs")
        assert discover_sources([tmp_path, lib]) == (lib,)

    def test_exclude_by_name(self, tmp_path: Path) -> None:
        lib = _touch(tmp_path / "lib.rs")
        _touch(tmp_path / "bindings.rs")
        assert discover_sources([tmp_path], ("bindings.rs",)) == (lib,)

    def test_exclude_by_path_glob(self, tmp_path: Path) -> None:
        lib = _touch(tmp_path / "lib.rs")
        _touch(tmp_path / "vendor" / "dep.rs")
        assert discover_sources([tmp_path], ("*/vendor/*",)) == (lib,)

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="does not exist"):
            discover_sources([tmp_path / "missing"])
