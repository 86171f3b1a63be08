"""Configuration loading from TOML files.

Reads `[tool.reprcheck]` from pyproject.toml or the top-level table
of a reprcheck.toml file:

    [tool.reprcheck]
    level = "deny"
    directive = "#[repr(C)]"
    exclude = ["vendor/*"]
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path

from reprcheck.domain.exceptions.configuration import ConfigurationError
from reprcheck.domain.model.configuration import DEFAULT_DIRECTIVE, LintConfig
from reprcheck.domain.model.enums import LintLevel

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ("reprcheck.toml", "pyproject.toml")
_KNOWN_KEYS = frozenset({"level", "directive", "exclude"})


def parse_level(value: str) -> LintLevel:
    """Parse a lint level name.

    Raises:
        ConfigurationError: If value is not a level name
    """
    try:
        return LintLevel(value.strip().lower())
    except ValueError:
        choices = ", ".join(level.value for level in LintLevel)
        raise ConfigurationError("level", f"unknown level {value!r} (expected one of: {choices})") from None


def config_from_mapping(data: Mapping[str, object]) -> LintConfig:
    """Build LintConfig from a parsed TOML table.

    Raises:
        ConfigurationError: If a key is unknown or a value is invalid
    """
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(unknown[0], "unknown configuration key")

    level = data.get("level")
    if level is not None and not isinstance(level, str):
        raise ConfigurationError("level", "must be a string")

    directive = data.get("directive", DEFAULT_DIRECTIVE)
    if not isinstance(directive, str):
        raise ConfigurationError("directive", "must be a string")

    exclude = data.get("exclude", [])
    if not isinstance(exclude, list) or not all(isinstance(item, str) for item in exclude):
        raise ConfigurationError("exclude", "must be a list of strings")

    try:
        return LintConfig(
            level=parse_level(level) if level is not None else None,
            directive=directive,
            exclude=tuple(exclude),
        )
    except ValueError as e:
        raise ConfigurationError("directive" if "directive" in str(e) else "exclude", str(e)) from e


def load_config(path: Path) -> LintConfig:
    """Load configuration from a TOML file.

    pyproject.toml files are read from `[tool.reprcheck]`, any other
    file from its top-level table. A pyproject.toml without the table
    yields the default configuration.

    Raises:
        ConfigurationError: If the file is unreadable, not TOML or invalid
    """
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except FileNotFoundError as e:
        raise ConfigurationError(str(path), "file not found") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(path), f"invalid TOML: {e}") from e

    if path.name == "pyproject.toml":
        tool = data.get("tool", {})
        table = tool.get("reprcheck", {}) if isinstance(tool, dict) else {}
    else:
        table = data

    if not isinstance(table, dict):
        raise ConfigurationError(str(path), "configuration must be a table")

    logger.debug("loaded configuration from %s", path)
    return config_from_mapping(table)


def find_config(start: Path) -> Path | None:
    """Find the nearest config file from start upwards.

    reprcheck.toml wins over pyproject.toml in the same directory;
    a pyproject.toml only counts when it has a [tool.reprcheck] table.
    """
    directory = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        for name in CONFIG_FILE_NAMES:
            candidate = candidate_dir / name
            if not candidate.is_file():
                continue
            if name == "pyproject.toml" and not _has_tool_table(candidate):
                continue
            return candidate
    return None


def _has_tool_table(path: Path) -> bool:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError):
        return False
    tool = data.get("tool", {})
    return isinstance(tool, dict) and "reprcheck" in tool
