"""Integration errors between the guard and its host record type."""

from attribute_guard.domain.exceptions import AttributeGuardError


class MisuseError(AttributeGuardError):
    """Raised when the guard is attached to a record lacking a capability.

    The guard needs to know whether a record is new (not yet persisted).
    A record type without an ``is_new_record`` predicate cannot be guarded;
    this is an integration error, not a data problem.

    Usage:
        raise MisuseError("guard requires lifecycle state capability")
    """

    pass
