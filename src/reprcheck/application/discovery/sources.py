"""Rust source discovery from paths."""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable
from pathlib import Path

SOURCE_SUFFIX = ".rs"
SKIPPED_DIRS = frozenset({"target", ".git"})


def _is_excluded(path: Path, exclude: tuple[str, ...]) -> bool:
    text = path.as_posix()
    return any(fnmatch.fnmatch(text, pattern) or fnmatch.fnmatch(path.name, pattern) for pattern in exclude)


def discover_sources(paths: Iterable[Path], exclude: tuple[str, ...] = ()) -> tuple[Path, ...]:
    """Collect .rs files from files and directories.

    Directories are scanned recursively, skipping build output
    (target/) and VCS directories. Files given explicitly are kept
    even without the .rs suffix.

    Args:
        paths: Files and directories to scan
        exclude: Glob patterns matched against the posix path and the file name

    Returns:
        Sorted, de-duplicated tuple of files

    Raises:
        FileNotFoundError: If a path does not exist
    """
    found: set[Path] = set()

    for path in paths:
        if not path.exists():
            raise FileNotFoundError(f"path does not exist: {path}")

        if path.is_file():
            if not _is_excluded(path, exclude):
                found.add(path)
            continue

        for source in path.rglob(f"*{SOURCE_SUFFIX}"):
            relative_parts = source.relative_to(path).parts
            if any(part in SKIPPED_DIRS for part in relative_parts[:-1]):
                continue
            if not source.is_file() or _is_excluded(source, exclude):
                continue
            found.add(source)

    return tuple(sorted(found))
