import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DB_NAME", "pidgeot_test")

from pidgeot.stores.memory import MemoryStore  # noqa: E402

CATEGORIES = ("books", "music", "films")


def make_records(n: int) -> list[dict]:
    return [
        {"id": i, "name": f"record-{i:03d}", "category": CATEGORIES[i % 3], "tag": "new" if i % 2 else "old"}
        for i in range(1, n + 1)
    ]


class RecordingQuery:
    """Query double that remembers every call made on it."""

    def __init__(self, records: list, calls: list) -> None:
        self.records = records
        self.calls = calls

    def sort(self, spec):
        self.calls.append(("sort", spec))
        return self

    def skip(self, n):
        self.calls.append(("skip", n))
        return self

    def limit(self, n):
        self.calls.append(("limit", n))
        return self

    async def exec(self):
        self.calls.append(("exec",))
        return list(self.records)


class RecordingStore:
    def __init__(self, total: int, records: list | None = None) -> None:
        self.total = total
        self.records = records or []
        self.calls: list = []

    async def count(self, filter):
        self.calls.append(("count", filter))
        return self.total

    def find(self, filter):
        self.calls.append(("find", filter))
        return RecordingQuery(self.records, self.calls)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore(make_records(120))


@pytest_asyncio.fixture
async def client(memory_store) -> AsyncGenerator[AsyncClient, None]:
    from pidgeot.deps import get_record_store
    from pidgeot.main import app

    app.dependency_overrides[get_record_store] = lambda: memory_store
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
