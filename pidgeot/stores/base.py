from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

ASCENDING = 1
DESCENDING = -1


class DocumentQuery(ABC):
    """Chainable query over the documents matching one filter."""

    @abstractmethod
    def sort(self, spec: Any) -> "DocumentQuery":
        ...

    @abstractmethod
    def skip(self, n: int) -> "DocumentQuery":
        ...

    @abstractmethod
    def limit(self, n: int) -> "DocumentQuery":
        ...

    @abstractmethod
    async def exec(self) -> list[Any]:
        """Run the query; return plain data detached from the store."""
        ...


class CountableQueryable(ABC):
    @abstractmethod
    async def count(self, filter: Mapping[str, Any]) -> int:
        """Number of documents matching filter."""
        ...

    @abstractmethod
    def find(self, filter: Mapping[str, Any]) -> DocumentQuery:
        ...


def _direction(value: Any) -> int:
    if value in (1, "1", "asc", "ascending"):
        return ASCENDING
    if value in (-1, "-1", "desc", "descending"):
        return DESCENDING
    raise ValueError(f"Invalid sort direction: {value!r}")


def parse_sort_spec(spec: Any) -> list[tuple[str, int]]:
    """
    Normalize a sort spec to [(field, 1 | -1), ...].

    Accepts "-created_at name" style strings, {field: direction} mappings,
    a single (field, direction) pair or a sequence of pairs.
    """
    if not spec:
        return []
    if isinstance(spec, str):
        out = []
        for token in spec.split():
            if token.startswith("-"):
                out.append((token[1:], DESCENDING))
            else:
                out.append((token.lstrip("+"), ASCENDING))
        if any(not field for field, _ in out):
            raise ValueError(f"Invalid sort spec: {spec!r}")
        return out
    if isinstance(spec, Mapping):
        return [(str(field), _direction(d)) for field, d in spec.items()]
    if isinstance(spec, tuple) and len(spec) == 2 and isinstance(spec[0], str):
        return [(spec[0], _direction(spec[1]))]
    if isinstance(spec, (list, tuple)):
        out = []
        for item in spec:
            out.extend(parse_sort_spec(item))
        return out
    raise ValueError(f"Invalid sort spec: {spec!r}")
