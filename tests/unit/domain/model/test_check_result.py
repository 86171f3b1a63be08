"""Tests for domain/model/check_result.py and check_stats.py."""

from pathlib import Path
from typing import get_type_hints

import pytest

from reprcheck.domain.model.check_result import CheckResult, FileError
from reprcheck.domain.model.check_stats import CheckStats
from reprcheck.domain.model.enums import LintLevel
from tests.factories import make_check_result, make_diagnostic


class TestCheckResult:
    """Tests for CheckResult."""

    def test_empty_passes(self) -> None:
        result = CheckResult.empty()
        assert result.passed
        assert result.diagnostic_count == 0

    def test_warnings_pass(self) -> None:
        result = make_check_result(diagnostics=(make_diagnostic(LintLevel.WARN),))
        assert result.passed
        assert result.warning_count == 1
        assert result.error_count == 0

    @pytest.mark.parametrize("level", [LintLevel.DENY, LintLevel.FORBID])
    def test_error_levels_fail(self, level: LintLevel) -> None:
        result = make_check_result(diagnostics=(make_diagnostic(level),))
        assert not result.passed
        assert result.error_count == 1

    def test_unreadable_file_fails(self) -> None:
        result = make_check_result(errors=(FileError(path=Path("bad.rs"), reason="encoding error"),))
        assert not result.passed


class TestFileError:
    """Tests for FileError."""

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            FileError(path=Path("bad.rs"), reason="")


class TestCheckStats:
    """Tests for CheckStats."""

    def test_empty(self) -> None:
        stats = CheckStats.empty()
        assert stats.files_checked == 0
        assert stats.analysis_time_ms == 0.0

    def test_empty_return_annotation_resolves(self) -> None:
        assert get_type_hints(CheckStats.empty)["return"] is CheckStats

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError, match="files_checked must be >= 0"):
            CheckStats(
                files_checked=-1,
                declarations_checked=0,
                declarations_skipped=0,
                lint_passes_run=0,
                analysis_time_ms=0.0,
            )
