"""Shared FastAPI dependencies."""

from pidgeot.models.record import Record
from pidgeot.stores.base import CountableQueryable
from pidgeot.stores.mongo import BeanieStore


def get_record_store() -> CountableQueryable:
    """Dependency: store backing /v1/records (overridden in tests)."""
    return BeanieStore(Record)
