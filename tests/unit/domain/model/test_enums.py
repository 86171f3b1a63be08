"""Tests for domain/model/enums.py."""

from reprcheck.domain.model.enums import Applicability, LintGroup, LintLevel, ReprHint


class TestLintLevel:
    """Tests for LintLevel enum."""

    def test_values_match_attribute_names(self) -> None:
        assert [level.value for level in LintLevel] == ["allow", "expect", "warn", "deny", "forbid"]

    def test_emitted_levels(self) -> None:
        assert not LintLevel.ALLOW.is_emitted
        assert not LintLevel.EXPECT.is_emitted
        assert LintLevel.WARN.is_emitted
        assert LintLevel.DENY.is_emitted

    def test_error_levels(self) -> None:
        assert not LintLevel.WARN.is_error
        assert LintLevel.DENY.is_error
        assert LintLevel.FORBID.is_error


class TestApplicability:
    """Tests for Applicability enum."""

    def test_values_unique(self) -> None:
        values = [a.value for a in Applicability]
        assert len(values) == len(set(values))

    def test_maybe_incorrect_value(self) -> None:
        assert Applicability.MAYBE_INCORRECT.value == "maybe-incorrect"


class TestLintGroup:
    """Tests for LintGroup enum."""

    def test_nursery_value(self) -> None:
        assert LintGroup.NURSERY.value == "nursery"


class TestReprHint:
    """Tests for ReprHint enum."""

    def test_has_seven_members(self) -> None:
        assert len(ReprHint) == 7
