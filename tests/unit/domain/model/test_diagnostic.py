"""Tests for domain/model/diagnostic.py."""

import pytest

from reprcheck.domain.model.enums import LintLevel
from tests.factories import make_diagnostic


class TestDiagnostic:
    """Tests for Diagnostic."""

    def test_delegates_to_finding(self) -> None:
        diagnostic = make_diagnostic()
        assert diagnostic.lint_name == "trailing_zero_sized_array_without_repr"
        assert diagnostic.message.startswith("trailing zero-sized array")

    @pytest.mark.parametrize("level", [LintLevel.ALLOW, LintLevel.EXPECT])
    def test_suppressed_level_raises(self, level: LintLevel) -> None:
        with pytest.raises(ValueError, match="must be emitted"):
            make_diagnostic(level=level)

    def test_str_compiler_style(self) -> None:
        result = str(make_diagnostic(level=LintLevel.DENY, line=3))
        lines = result.splitlines()
        assert lines[0].startswith("deny: trailing zero-sized array")
        assert "lib.rs:3:1" in lines[1]
        assert "  + #[repr(C)]" in lines
        assert "  + struct " in lines
