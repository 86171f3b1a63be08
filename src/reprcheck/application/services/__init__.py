"""Application services."""

from reprcheck.application.services.checker import ReprChecker
from reprcheck.application.services.linter import Linter

__all__ = ["Linter", "ReprChecker"]
