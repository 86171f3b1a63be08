"""End-to-end: tree-sitter front end, linter, fix applier."""

from pathlib import Path

import pytest

from reprcheck.application.fixes.applier import apply_suggestions
from reprcheck.application.services.checker import ReprChecker
from reprcheck.application.services.linter import Linter
from reprcheck.domain.model.configuration import LintConfig
from reprcheck.domain.model.enums import Applicability, LintLevel
from reprcheck.infrastructure.adapters.tree_sitter_parser import TreeSitterRustParser

pytestmark = pytest.mark.integration

CRATE = """\
#![warn(clippy::nursery)]

const ZERO: usize = 0;

/// Rarely useful.
#[derive(Debug)]
pub struct RarelyUseful {
    some_field: usize,
    last: [u32; 0],
}

#[repr(C)]
struct MoreOftenUseful {
    some_field: usize,
    last: [u32; 0],
}

struct NamedZero {
    last: [u8; ZERO],
}

struct NonZero {
    last: [u8; 3],
}

struct NotLast {
    first: [u8; 0],
    last: u8,
}

struct Generic<const N: usize> {
    last: [u8; N],
}

#[allow(clippy::trailing_zero_sized_array_without_repr)]
struct Allowed {
    last: [u8; 0],
}

mod ffi {
    const LEN: usize = 2 - 2;

    pub(crate) struct Header {
        len: usize,
        data: [u8; self::LEN],
    }

    fn build() {
        struct Local(u8, [u16; super::ZERO]);
    }
}

union NotAStruct {
    a: u32,
    b: [u8; 0],
}
"""


@pytest.fixture(scope="module")
def parser() -> TreeSitterRustParser:
    return TreeSitterRustParser()


class TestLintCrate:
    """Lint a realistic source file."""

    def test_flagged_declarations(self, parser: TreeSitterRustParser) -> None:
        unit = parser.parse_source(CRATE, Path("lib.rs"))
        diagnostics = Linter().check_unit(unit)

        flagged = [unit.source.snippet(d.finding.span).splitlines()[0] for d in diagnostics]
        assert flagged == [
            "pub struct RarelyUseful {",
            "struct NamedZero {",
            "pub(crate) struct Header {",
            "struct Local(u8, [u16; super::ZERO]);",
        ]

    def test_flagged_span_is_declaration(self, parser: TreeSitterRustParser) -> None:
        unit = parser.parse_source(CRATE, Path("lib.rs"))
        diagnostic = Linter().check_unit(unit)[0]
        snippet = unit.source.snippet(diagnostic.finding.span)
        assert snippet.startswith("pub struct RarelyUseful {")
        assert snippet.endswith("}")
        assert diagnostic.location.line == 7

    def test_fix_is_idempotent(self, parser: TreeSitterRustParser) -> None:
        unit = parser.parse_source(CRATE, Path("lib.rs"))
        diagnostics = Linter().check_unit(unit)
        fixed = apply_suggestions(CRATE, (d.finding.suggestion for d in diagnostics), frozenset(Applicability))

        assert len(fixed.applied) == 4
        assert "#[derive(Debug)]\n#[repr(C)]\npub struct RarelyUseful {" in fixed.text
        assert "    #[repr(C)]\n    pub(crate) struct Header {" in fixed.text
        assert "        #[repr(C)]\n        struct Local(u8, [u16; super::ZERO]);" in fixed.text

        relinted = Linter().check_unit(parser.parse_source(fixed.text, Path("lib.rs")))
        assert relinted == ()

    def test_fixed_text_only_inserts(self, parser: TreeSitterRustParser) -> None:
        unit = parser.parse_source(CRATE, Path("lib.rs"))
        diagnostics = Linter().check_unit(unit)
        fixed = apply_suggestions(CRATE, (d.finding.suggestion for d in diagnostics), frozenset(Applicability))

        def without_directives(text: str) -> list[str]:
            return [line for line in text.splitlines() if line.strip() != "#[repr(C)]"]

        assert without_directives(fixed.text) == without_directives(CRATE)
        assert fixed.text.count("#[repr(C)]") == CRATE.count("#[repr(C)]") + 4


class TestCheckPaths:
    """ReprChecker over a directory with the real front end."""

    def test_deny_via_config(self, parser: TreeSitterRustParser, tmp_path: Path) -> None:
        (tmp_path / "lib.rs").write_text(CRATE, encoding="utf-8")
        checker = ReprChecker.from_config(parser, LintConfig(level=LintLevel.DENY))

        result = checker.check_paths([tmp_path])

        # The inner #![warn(clippy::nursery)] overrides the configured default.
        assert result.passed
        assert {d.level for d in result.diagnostics} == {LintLevel.WARN}
        assert result.stats.declarations_checked == 10
