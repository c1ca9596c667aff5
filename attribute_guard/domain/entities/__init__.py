"""Entities: the attribute guard mixin for host record types."""

from attribute_guard.domain.entities.attribute_guard_mixin import AttributeGuardMixin

__all__: list[str] = ["AttributeGuardMixin"]
