"""Configuration exceptions."""

from reprcheck.domain.exceptions.base import ReprCheckError


class ConfigurationError(ReprCheckError):
    """Invalid user configuration.

    Raised when a config file or option cannot be used.
    FAIL-FIRST: validates inputs immediately.

    Attributes:
        key: Offending configuration key (must not be empty)
        reason: Why the value is invalid (must not be empty)
    """

    def __init__(self, key: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not key:
            raise ValueError("key must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration '{key}': {reason}")
