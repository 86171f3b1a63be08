"""Configuration loading."""

from reprcheck.infrastructure.config.loader import (
    config_from_mapping,
    find_config,
    load_config,
    parse_level,
)

__all__ = ["config_from_mapping", "find_config", "load_config", "parse_level"]
