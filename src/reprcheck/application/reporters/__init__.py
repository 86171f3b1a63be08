"""Reporters for lint results.

PlainTextReporter and JSONReporter use stdlib only,
ConsoleReporter renders with rich.
"""

from reprcheck.application.reporters._base import BaseReporter
from reprcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from reprcheck.application.reporters.json_reporter import JSONReporter
from reprcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
    "JSONReporter",
]
