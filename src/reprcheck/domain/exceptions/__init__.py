"""Domain exceptions."""

from reprcheck.domain.exceptions.base import ReprCheckError
from reprcheck.domain.exceptions.configuration import ConfigurationError
from reprcheck.domain.exceptions.parsing import ParsingError

__all__ = [
    "ReprCheckError",
    "ParsingError",
    "ConfigurationError",
]
