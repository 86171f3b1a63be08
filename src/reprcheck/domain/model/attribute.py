"""Attribute value object."""

from __future__ import annotations

from dataclasses import dataclass

from reprcheck.domain.model.enums import AttrStyle
from reprcheck.domain.model.span import Span


@dataclass(frozen=True, slots=True)
class Attribute:
    """Attribute attached to a declaration or a scope.

    Attributes:
        path: Attribute path as written (e.g., "repr", "derive", "clippy::msrv")
        arguments: Raw text inside the delimiter group (e.g., "C, packed"),
            None for bare attributes and name = value forms
        span: Span of the whole attribute, including #[ and ]
        style: OUTER (#[..]) or INNER (#![..])
    """

    path: str
    arguments: str | None
    span: Span
    style: AttrStyle = AttrStyle.OUTER

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("attribute path must not be empty")
        if self.span is None:
            raise TypeError("span must not be None")

    @property
    def name(self) -> str:
        """Last path segment (e.g., "msrv" for "clippy::msrv")."""
        return self.path.rsplit("::", 1)[-1].strip()

    def __str__(self) -> str:
        bang = "!" if self.style is AttrStyle.INNER else ""
        args = f"({self.arguments})" if self.arguments is not None else ""
        return f"#{bang}[{self.path}{args}]"
