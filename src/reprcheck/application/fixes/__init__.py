"""Fix application for suggested edits."""

from reprcheck.application.fixes.applier import SAFE_APPLICABILITY, FixResult, apply_suggestions

__all__ = ["FixResult", "SAFE_APPLICABILITY", "apply_suggestions"]
