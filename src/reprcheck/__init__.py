"""reprcheck - lint for Rust structs ending in a zero-sized array without a repr attribute."""

__version__ = "0.1.0"

from reprcheck.application.lints import TrailingZeroSizedArrayWithoutRepr, examine
from reprcheck.application.services import Linter, ReprChecker

__all__ = [
    "Linter",
    "ReprChecker",
    "TrailingZeroSizedArrayWithoutRepr",
    "examine",
    "__version__",
]
