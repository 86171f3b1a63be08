"""Tests for domain/model/finding.py."""

import pytest

from reprcheck.domain.model.enums import Applicability
from reprcheck.domain.model.finding import LintFinding, Suggestion
from reprcheck.domain.model.span import Span
from tests.factories import make_finding, make_suggestion


class TestSuggestion:
    """Tests for Suggestion."""

    def test_empty_message_raises(self) -> None:
        with pytest.raises(ValueError, match="message must not be empty"):
            Suggestion(span=Span(0, 0), replacement="x", applicability=Applicability.MACHINE_APPLICABLE, message="")

    def test_empty_span_is_insertion(self) -> None:
        suggestion = make_suggestion(span=Span(4, 4))
        assert suggestion.span.is_empty


class TestLintFinding:
    """Tests for LintFinding."""

    def test_help_and_applicability_come_from_suggestion(self) -> None:
        finding = make_finding(suggestion=make_suggestion(applicability=Applicability.MAYBE_INCORRECT))
        assert finding.applicability is Applicability.MAYBE_INCORRECT
        assert finding.help == "consider adding `#[repr(C)]` or another `repr` attribute"

    def test_empty_lint_name_raises(self) -> None:
        with pytest.raises(ValueError, match="lint_name must not be empty"):
            LintFinding(lint_name="", message="m", span=Span(0, 1), suggestion=make_suggestion())
