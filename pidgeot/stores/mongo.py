"""Store adapter over a Beanie document class (MongoDB through Motor)."""

from collections.abc import Mapping
from typing import Any

from beanie import Document
from beanie.odm.enums import SortDirection

from pidgeot.stores.base import CountableQueryable, DocumentQuery, parse_sort_spec


class BeanieQuery(DocumentQuery):
    def __init__(self, query: Any) -> None:
        self._query = query

    def sort(self, spec: Any) -> "BeanieQuery":
        self._query = self._query.sort(
            [(field, SortDirection(direction)) for field, direction in parse_sort_spec(spec)]
        )
        return self

    def skip(self, n: int) -> "BeanieQuery":
        self._query = self._query.skip(n)
        return self

    def limit(self, n: int) -> "BeanieQuery":
        self._query = self._query.limit(n)
        return self

    async def exec(self) -> list[dict[str, Any]]:
        docs = await self._query.to_list()
        return [d.model_dump(mode="json") for d in docs]


class BeanieStore(CountableQueryable):
    def __init__(self, document_model: type[Document]) -> None:
        self.document_model = document_model

    async def count(self, filter: Mapping[str, Any]) -> int:
        return await self.document_model.find(dict(filter or {})).count()

    def find(self, filter: Mapping[str, Any]) -> BeanieQuery:
        return BeanieQuery(self.document_model.find(dict(filter or {})))
