"""Base exception classes for the attribute guard domain layer."""


class AttributeGuardError(Exception):
    """Base exception for all attribute guard errors.

    All guard-specific exceptions MUST inherit from this class so callers
    can catch everything raised by the guard in one place.

    Subclasses:
    - ConfigurationError: invalid lock declaration
    - MisuseError: host record missing a required capability
    - LockedAttributeError: fatal reaction to a locked attribute change
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
