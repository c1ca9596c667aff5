"""Test helpers for attribute guard tests.

Helpers:
    PlainRecord: hand-written host satisfying the GuardedRecord port
    SampleRecord and subclasses: pydantic records with lock declarations

Usage:
    from tests.helpers import PlainRecord
    from tests.helpers.models import LockedNameRecord
"""

from tests.helpers.plain_record import PlainRecord

__all__ = ["PlainRecord"]
