from pidgeot.stores.base import CountableQueryable, DocumentQuery, parse_sort_spec
from pidgeot.stores.memory import MemoryStore

__all__ = [
    "CountableQueryable",
    "DocumentQuery",
    "MemoryStore",
    "parse_sort_spec",
]
