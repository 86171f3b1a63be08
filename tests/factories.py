"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from collections.abc import Mapping
from pathlib import Path

from reprcheck.application.attributes.repr_hints import ReprAttributeClassifier
from reprcheck.application.evaluation.const_evaluator import ConstEvaluator
from reprcheck.domain.model.attribute import Attribute
from reprcheck.domain.model.check_result import CheckResult, FileError
from reprcheck.domain.model.check_stats import CheckStats
from reprcheck.domain.model.declaration import AggregateDeclaration, Field, GenericParam
from reprcheck.domain.model.diagnostic import Diagnostic
from reprcheck.domain.model.enums import Applicability, AttrStyle, ItemKind, LintLevel
from reprcheck.domain.model.expressions import ArrayType, ConstExpr, IntLiteral, OtherType, PathExpr, TypeExpr
from reprcheck.domain.model.finding import LintFinding, Suggestion
from reprcheck.domain.model.location import Location
from reprcheck.domain.model.source_file import SourceFile
from reprcheck.domain.model.span import Span
from reprcheck.domain.ports.lint_pass import LintContext

# Default test file path - consistent across all tests
DEFAULT_TEST_FILE = Path("/test/lib.rs")

_KEYWORDS = {ItemKind.STRUCT: "struct", ItemKind.UNION: "union", ItemKind.ENUM: "enum"}


def make_attr(
    path: str,
    arguments: str | None = None,
    *,
    style: AttrStyle = AttrStyle.OUTER,
    span: Span | None = None,
) -> Attribute:
    """Create an Attribute for tests.

    Args:
        path: Attribute path (e.g., "repr", "allow")
        arguments: Text inside the parentheses, None for bare attributes
        style: OUTER or INNER
        span: Attribute span (default: 0..len of rendered text)

    Returns:
        Attribute instance
    """
    if span is None:
        rendered = f"#[{path}({arguments})]" if arguments is not None else f"#[{path}]"
        span = Span(0, len(rendered))
    return Attribute(path=path, arguments=arguments, span=span, style=style)


def array_of(length: ConstExpr | str | int, element: str = "u8") -> ArrayType:
    """Create [element; length]; str lengths are names, int lengths literals."""
    if isinstance(length, int):
        length = IntLiteral(text=str(length))
    elif isinstance(length, str):
        length = PathExpr(segments=tuple(length.split("::")))
    return ArrayType(element=OtherType(text=element), length=length)


def make_field(name: str, ty: TypeExpr | str = "usize", span: Span | None = None) -> Field:
    """Create a Field; str types become OtherType."""
    if isinstance(ty, str):
        ty = OtherType(text=ty)
    return Field(name=name, ty=ty, span=span if span is not None else Span(0, 0))


def make_decl(
    name: str = "Foo",
    fields: tuple[Field, ...] = (),
    *,
    kind: ItemKind = ItemKind.STRUCT,
    attributes: tuple[Attribute, ...] = (),
    generics: tuple[GenericParam, ...] = (),
    module_path: tuple[str, ...] = (),
    scope_attributes: tuple[Attribute, ...] = (),
    span: Span | None = None,
    ident_span: Span | None = None,
) -> AggregateDeclaration:
    """Create an AggregateDeclaration with synthetic spans.

    The default spans match the text `struct Foo { ... }` starting at 0.
    Use declare() when the spans must match real source text.
    """
    keyword = _KEYWORDS[kind]
    if ident_span is None:
        ident_span = Span(len(keyword) + 1, len(keyword) + 1 + len(name))
    if span is None:
        span = Span(0, ident_span.hi + 20)
    return AggregateDeclaration(
        name=name,
        kind=kind,
        fields=fields,
        span=span,
        ident_span=ident_span,
        attributes=attributes,
        generics=generics,
        module_path=module_path,
        scope_attributes=scope_attributes,
    )


def declare(
    source: SourceFile,
    name: str,
    fields: tuple[Field, ...] = (),
    *,
    kind: ItemKind = ItemKind.STRUCT,
    attributes: tuple[Attribute, ...] = (),
    generics: tuple[GenericParam, ...] = (),
    module_path: tuple[str, ...] = (),
) -> AggregateDeclaration:
    """Create an AggregateDeclaration whose spans point into source.

    The declaration starts at the first non-blank character of the line
    holding `<keyword> <name>` (so visibility is included) and ends at
    the first `}` or `;` that ends a line after the name.

    Args:
        source: Source text holding the declaration
        name: Identifier to locate
        fields: Field list (spans are not checked)

    Returns:
        AggregateDeclaration with real spans
    """
    keyword = f"{_KEYWORDS[kind]} {name}"
    ident_lo = source.text.index(keyword) + len(keyword) - len(name)
    line_start = source.text.rfind("\n", 0, ident_lo) + 1
    line = source.text[line_start:ident_lo]
    lo = line_start + len(line) - len(line.lstrip())
    ends = [pos for pos in (source.text.find("}\n", ident_lo), source.text.find(";\n", ident_lo)) if pos >= 0]
    hi = min(ends) + 1
    return AggregateDeclaration(
        name=name,
        kind=kind,
        fields=fields,
        span=Span(lo, hi),
        ident_span=Span(ident_lo, ident_lo + len(name)),
        attributes=attributes,
        generics=generics,
        module_path=module_path,
    )


def make_source(text: str, path: Path = DEFAULT_TEST_FILE) -> SourceFile:
    """Create a SourceFile for tests."""
    return SourceFile(path=path, text=text)


def make_context(
    source: SourceFile | None = None,
    constants: Mapping[tuple[str, ...], ConstExpr] | None = None,
) -> LintContext:
    """Create a LintContext with the default collaborators.

    Args:
        source: Source map (default: 200 filler characters, enough for synthetic spans)
        constants: Named constants for the evaluator

    Returns:
        LintContext instance
    """
    return LintContext(
        evaluator=ConstEvaluator(constants or {}),
        classifier=ReprAttributeClassifier(),
        source_map=source or make_source("_" * 200),
    )


def make_suggestion(
    span: Span | None = None,
    replacement: str = "#[repr(C)]\nstruct ",
    applicability: Applicability = Applicability.MAYBE_INCORRECT,
) -> Suggestion:
    """Create a Suggestion for tests."""
    return Suggestion(
        span=span if span is not None else Span(0, 7),
        replacement=replacement,
        applicability=applicability,
        message="consider adding `#[repr(C)]` or another `repr` attribute",
    )


def make_finding(
    span: Span | None = None,
    suggestion: Suggestion | None = None,
    lint_name: str = "trailing_zero_sized_array_without_repr",
) -> LintFinding:
    """Create a LintFinding for tests."""
    return LintFinding(
        lint_name=lint_name,
        message="trailing zero-sized array in a struct which is not marked with a `repr` attribute",
        span=span if span is not None else Span(0, 30),
        suggestion=suggestion or make_suggestion(),
    )


def make_location(line: int = 1, column: int = 0, file: Path = DEFAULT_TEST_FILE) -> Location:
    """Create a Location for tests."""
    return Location(file=file, line=line, column=column)


def make_diagnostic(
    level: LintLevel = LintLevel.WARN,
    line: int = 1,
    source_line: str = "struct Foo {",
    finding: LintFinding | None = None,
) -> Diagnostic:
    """Create a Diagnostic for tests."""
    return Diagnostic(
        finding=finding or make_finding(),
        level=level,
        location=make_location(line=line),
        source_line=source_line,
    )


def make_stats(files_checked: int = 1, declarations_checked: int = 1, declarations_skipped: int = 0) -> CheckStats:
    """Create CheckStats for tests."""
    return CheckStats(
        files_checked=files_checked,
        declarations_checked=declarations_checked,
        declarations_skipped=declarations_skipped,
        lint_passes_run=1,
        analysis_time_ms=1.5,
    )


def make_check_result(
    diagnostics: tuple[Diagnostic, ...] = (),
    errors: tuple[FileError, ...] = (),
    fixed_files: tuple[Path, ...] = (),
    stats: CheckStats | None = None,
) -> CheckResult:
    """Create a CheckResult for tests."""
    return CheckResult(
        diagnostics=diagnostics,
        errors=errors,
        fixed_files=fixed_files,
        stats=stats or make_stats(),
    )
