"""Bootstrap wiring for attribute guard."""

from attribute_guard.bootstrap.guard import configure, structlog_sink

__all__ = ["configure", "structlog_sink"]
