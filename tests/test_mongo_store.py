"""BeanieStore against a stand-in for a Beanie document class (no MongoDB)."""

import pytest
from beanie.odm.enums import SortDirection

from pidgeot.stores.mongo import BeanieStore


class _Doc:
    def __init__(self, data: dict) -> None:
        self.data = data

    def model_dump(self, mode: str = "python") -> dict:
        assert mode == "json"
        return dict(self.data)


class _FindMany:
    def __init__(self, model, filter):
        self.model = model
        self.filter = filter

    def sort(self, *args):
        self.model.calls.append(("sort", args))
        return self

    def skip(self, n):
        self.model.calls.append(("skip", n))
        return self

    def limit(self, n):
        self.model.calls.append(("limit", n))
        return self

    async def count(self):
        return len(self.model.rows)

    async def to_list(self):
        return [_Doc(r) for r in self.model.rows]


class _Model:
    rows = [{"id": "65a0", "name": "one"}, {"id": "65a1", "name": "two"}]
    calls: list = []

    @classmethod
    def find(cls, filter):
        cls.calls.append(("find", filter))
        return _FindMany(cls, filter)


@pytest.fixture(autouse=True)
def _reset_calls():
    _Model.calls = []


@pytest.mark.asyncio
async def test_count():
    store = BeanieStore(_Model)
    assert await store.count({"name": "one"}) == 2
    assert _Model.calls == [("find", {"name": "one"})]


@pytest.mark.asyncio
async def test_find_returns_plain_dicts():
    store = BeanieStore(_Model)
    rows = await store.find({}).sort("-name").skip(5).limit(10).exec()
    assert rows == _Model.rows
    assert all(isinstance(r, dict) for r in rows)
    assert _Model.calls == [
        ("find", {}),
        ("sort", ([("name", SortDirection.DESCENDING)],)),
        ("skip", 5),
        ("limit", 10),
    ]
