"""Mixin adding attribute locks to a record type.

Mix into any record class satisfying the GuardedRecord port. Defining a
subclass registers it with the lock registry (snapshotting its parent's
locks) and, when the host offers ``validates_with``, hooks the locked
attributes validator into the host's validation phase.

Usage:
    class Account(AttributeGuardMixin, TrackedModel):
        owner_id: int

    Account.lock_attributes("owner_id")

    account = Account.create(owner_id=1)
    account.owner_id = 2
    account.is_valid()  # False: owner_id is locked and cannot be changed

    with account.unlocked("owner_id"):
        account.save()
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from attribute_guard.domain.errors.misuse import MisuseError
from attribute_guard.domain.models.message_catalog import LOCKED, MessageKey
from attribute_guard.domain.models.reaction_mode import ReactionMode
from attribute_guard.domain.primitives import unlock_scope
from attribute_guard.domain.primitives.lock_registry import LOCK_REGISTRY, flatten_names
from attribute_guard.domain.services.locked_attributes_validator import (
    LOCKED_ATTRIBUTES_VALIDATOR,
)

T = TypeVar("T")


class AttributeGuardMixin:
    """Lock declared attributes of persisted records against change."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        LOCK_REGISTRY.register_type(cls)
        validates_with = getattr(cls, "validates_with", None)
        if callable(validates_with):
            validates_with(LOCKED_ATTRIBUTES_VALIDATOR)

    @classmethod
    def lock_attributes(
        cls,
        *attributes: Any,
        error: MessageKey | str = LOCKED,
        mode: ReactionMode | str | Callable[[Any, str], object] = "error",
    ) -> None:
        """Lock attributes so they cannot be changed directly.

        Subclasses defined afterwards inherit these locks; subclasses that
        already exist do not.

        Args:
            *attributes: Attribute names, possibly nested in lists.
            error: Validation message used by the default mode.
            mode: "error" (default), "warn", "raise", a callable taking
                  (record, attribute), or a ReactionMode instance.

        Raises:
            ConfigurationError: If the declaration is invalid.
            MisuseError: If the class has no is_new_record() capability.
        """
        if not callable(getattr(cls, "is_new_record", None)):
            raise MisuseError(
                f"guard requires lifecycle state capability: "
                f"{cls.__name__} has no is_new_record()"
            )
        LOCK_REGISTRY.declare(cls, attributes, message=error, mode=mode)

    @classmethod
    def locked_attribute_names(cls) -> list[str]:
        """Return the names of the locked attributes, inherited ones first."""
        return LOCK_REGISTRY.locked_attribute_names(cls)

    def unlock_attributes(
        self, *attributes: Any, body: Callable[[], T] | None = None
    ) -> Any:
        """Unlock attributes so they can be changed.

        Without ``body`` the attributes stay unlocked until
        clear_unlocked_attributes() and the record itself is returned so
        calls can be chained. With ``body`` they are unlocked only while
        it runs and its result is returned.

        Example:
            >>> user.unlock_attributes("email").update(email="user@example.com")
        """
        names = flatten_names(attributes)
        if body is not None:
            with unlock_scope.ScopedUnlock(self, names):
                return body()
        unlock_scope.unlock(self, names)
        return self

    def unlocked(self, *attributes: Any) -> unlock_scope.ScopedUnlock:
        """Return a context manager unlocking attributes inside a with-block."""
        return unlock_scope.ScopedUnlock(self, flatten_names(attributes))

    def attribute_locked(self, attribute: Any) -> bool:
        """Return True if the attribute is currently locked.

        New records have no locked attributes.
        """
        if self.is_new_record():  # type: ignore[attr-defined]
            return False
        attribute = str(attribute)
        if LOCK_REGISTRY.policy_for(type(self), attribute) is None:
            return False
        return not unlock_scope.is_unlocked(self, attribute)

    def clear_unlocked_attributes(self) -> None:
        """Clear any unlocked attributes."""
        unlock_scope.clear(self)
