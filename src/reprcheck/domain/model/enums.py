"""Domain enumerations."""

from enum import Enum, auto


class ItemKind(Enum):
    """Kind of aggregate type declaration."""

    STRUCT = auto()
    UNION = auto()
    ENUM = auto()


class AttrStyle(Enum):
    """Attribute placement style."""

    OUTER = auto()  # #[attr]
    INNER = auto()  # #![attr]


class Applicability(Enum):
    """Confidence that a suggested edit is correct.

    Mirrors the applicability levels used by compiler diagnostics.
    Fix tooling only auto-applies MACHINE_APPLICABLE edits by default.
    """

    MACHINE_APPLICABLE = "machine-applicable"
    MAYBE_INCORRECT = "maybe-incorrect"
    HAS_PLACEHOLDERS = "has-placeholders"
    UNSPECIFIED = "unspecified"


class LintLevel(Enum):
    """Effective level of a lint.

    Ordered by severity: ALLOW and EXPECT suppress emission,
    WARN reports, DENY and FORBID fail the check.
    """

    ALLOW = "allow"
    EXPECT = "expect"
    WARN = "warn"
    DENY = "deny"
    FORBID = "forbid"

    @property
    def is_emitted(self) -> bool:
        """Check if diagnostics at this level are reported."""
        return self not in (LintLevel.ALLOW, LintLevel.EXPECT)

    @property
    def is_error(self) -> bool:
        """Check if diagnostics at this level fail the check."""
        return self in (LintLevel.DENY, LintLevel.FORBID)


class LintGroup(Enum):
    """Lint group a lint belongs to.

    A level attribute naming the group (clippy::nursery) applies to
    every lint of the group.
    """

    CORRECTNESS = "correctness"
    SUSPICIOUS = "suspicious"
    STYLE = "style"
    PEDANTIC = "pedantic"
    NURSERY = "nursery"


class ReprHint(Enum):
    """Layout representation hint carried by a repr attribute.

    Closed set: every variant counts as a layout directive.
    """

    C = auto()
    PACKED = auto()
    ALIGN = auto()
    TRANSPARENT = auto()
    SIMD = auto()
    RUST = auto()
    INT = auto()  # repr(u8), repr(isize), ...
