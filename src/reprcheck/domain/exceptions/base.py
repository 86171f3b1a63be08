"""Base exceptions for reprcheck domain."""


class ReprCheckError(Exception):
    """Root exception for all reprcheck errors.

    All domain exceptions inherit from this.
    Allows catching all reprcheck-specific errors.
    """
