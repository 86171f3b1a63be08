"""Source discovery."""

from reprcheck.application.discovery.sources import SOURCE_SUFFIX, discover_sources

__all__ = ["SOURCE_SUFFIX", "discover_sources"]
