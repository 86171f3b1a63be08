"""Domain ports: contracts implemented by collaborators."""

from reprcheck.domain.ports.const_evaluator import ConstEvaluatorProtocol
from reprcheck.domain.ports.lint_pass import LintContext, LintPassProtocol
from reprcheck.domain.ports.repr_classifier import ReprClassifierProtocol
from reprcheck.domain.ports.reporter import ReporterProtocol
from reprcheck.domain.ports.source_map import SourceMapProtocol
from reprcheck.domain.ports.source_parser import SourceParserPort

__all__ = [
    "ConstEvaluatorProtocol",
    "LintContext",
    "LintPassProtocol",
    "ReprClassifierProtocol",
    "ReporterProtocol",
    "SourceMapProtocol",
    "SourceParserPort",
]
