"""Domain layer for attribute guard.

Holds the lock registry, the per-instance unlock scopes, the reaction
modes and the validator that enforces them. Nothing in here depends on a
particular persistence framework; hosts satisfy the GuardedRecord port.
"""

from attribute_guard.domain.exceptions import AttributeGuardError

__all__: list[str] = ["AttributeGuardError"]
