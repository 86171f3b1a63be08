"""Representation directive classifier protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from reprcheck.domain.model.attribute import Attribute


class ReprClassifierProtocol(Protocol):
    """Contract for deciding whether an attribute fixes memory layout.

    Encapsulates every accepted spelling so the lint does not
    hardcode any of them.
    """

    def is_representation_directive(self, attribute: Attribute) -> bool:
        """Check if attribute is a layout representation directive.

        Args:
            attribute: Attribute attached to a declaration

        Returns:
            True if the attribute constrains the layout
        """
        ...
