"""In-process document store over a list of dicts."""

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from pidgeot.stores.base import DESCENDING, CountableQueryable, DocumentQuery, parse_sort_spec

_MISSING = object()


def _resolve(doc: Mapping[str, Any], path: str) -> Any:
    value: Any = doc
    for part in path.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return _MISSING
        value = value[part]
    return value


def matches(doc: Mapping[str, Any], filter: Mapping[str, Any]) -> bool:
    """Equality match on every filter key; dotted keys reach into nested dicts."""
    return all(_resolve(doc, k) == v for k, v in filter.items())


def _sort_key(value: Any) -> tuple[bool, Any]:
    # missing/None sort first ascending, like MongoDB
    if value is _MISSING or value is None:
        return (False, 0)
    return (True, value)


class MemoryQuery(DocumentQuery):
    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents
        self._sort: list[tuple[str, int]] = []
        self._skip = 0
        self._limit: int | None = None

    def sort(self, spec: Any) -> "MemoryQuery":
        self._sort = parse_sort_spec(spec)
        return self

    def skip(self, n: int) -> "MemoryQuery":
        self._skip = max(0, n)
        return self

    def limit(self, n: int) -> "MemoryQuery":
        self._limit = n
        return self

    async def exec(self) -> list[dict[str, Any]]:
        docs = list(self._documents)
        # stable sort: apply keys from least to most significant
        for field, direction in reversed(self._sort):
            docs.sort(key=lambda d: _sort_key(_resolve(d, field)), reverse=direction == DESCENDING)
        end = None if not self._limit else self._skip + self._limit
        return copy.deepcopy(docs[self._skip:end])


class MemoryStore(CountableQueryable):
    def __init__(self, documents: Iterable[Mapping[str, Any]] = ()) -> None:
        self.documents: list[dict[str, Any]] = [dict(d) for d in documents]

    async def count(self, filter: Mapping[str, Any]) -> int:
        return sum(1 for d in self.documents if matches(d, filter or {}))

    def find(self, filter: Mapping[str, Any]) -> MemoryQuery:
        return MemoryQuery([d for d in self.documents if matches(d, filter or {})])
