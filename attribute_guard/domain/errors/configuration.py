"""Lock declaration errors.

Raised while a model type declares its locked attributes. These indicate a
programming mistake in the declaration and are never retried.
"""

from attribute_guard.domain.exceptions import AttributeGuardError


class ConfigurationError(AttributeGuardError):
    """Raised when a lock declaration is invalid.

    Examples:
        - No attribute names given (after flattening nested sequences)
        - A blank attribute name
        - A message that is neither text nor a MessageKey
        - A mode that is not a reaction mode, shorthand or callable

    Usage:
        raise ConfigurationError("lock_attributes requires at least one attribute name")
    """

    pass
