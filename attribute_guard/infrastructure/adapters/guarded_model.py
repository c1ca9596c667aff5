"""Ready-made base for pydantic records with attribute locks."""

from __future__ import annotations

from pydantic import PrivateAttr

from attribute_guard.domain.entities.attribute_guard_mixin import AttributeGuardMixin
from attribute_guard.infrastructure.adapters.tracked_model import TrackedModel


class GuardedModel(AttributeGuardMixin, TrackedModel):
    """TrackedModel with the locked attributes validator installed.

    Example:
        >>> class Account(GuardedModel):
        ...     owner_id: int
        >>> Account.lock_attributes("owner_id")
        >>> account = Account.create(owner_id=1)
        >>> account.owner_id = 2
        >>> account.is_valid()
        False
        >>> account.errors["owner_id"]
        ['is locked and cannot be changed']
    """

    _unlocked_attributes: frozenset[str] | None = PrivateAttr(default=None)
