"""Ports describing what the guard needs from its host record type."""

from attribute_guard.domain.ports.guarded_record import GuardedRecord

__all__: list[str] = ["GuardedRecord"]
