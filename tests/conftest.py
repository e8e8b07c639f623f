from __future__ import annotations

from typing import Any, Dict, List, Optional, Set

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from wikisearch_core.index.memory import MemoryIndex


class FakePipeline:
    def __init__(self, client: "FakeRedis"):
        self._client = client
        self._commands: List[tuple] = []

    def hget(self, key: str, field: str) -> "FakePipeline":
        self._commands.append((key, field))
        return self

    def execute(self) -> List[Optional[Any]]:
        self._client._check()
        return [self._client.hashes.get(key, {}).get(field) for key, field in self._commands]


class FakeRedis:
    """Subset of the redis-py client used by RedisIndex."""

    def __init__(self):
        self.sets: Dict[str, Set[Any]] = {}
        self.hashes: Dict[str, Dict[str, Any]] = {}
        self.down = False
        self.closed = False

    def _check(self) -> None:
        if self.down:
            raise RedisConnectionError("Connection refused")

    def index(self, term: str, doc_id: str, count: Any) -> None:
        self.sets.setdefault(f"URLSet:{term}", set()).add(doc_id)
        key = doc_id.decode("utf-8") if isinstance(doc_id, bytes) else doc_id
        self.hashes.setdefault(f"TermCounter:{key}", {})[term] = count

    def smembers(self, key: str) -> Set[Any]:
        self._check()
        return set(self.sets.get(key, set()))

    def scard(self, key: str) -> int:
        self._check()
        return len(self.sets.get(key, set()))

    def pipeline(self, transaction: bool = True) -> FakePipeline:
        return FakePipeline(self)

    def ping(self) -> bool:
        self._check()
        return True

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_redis() -> FakeRedis:
    client = FakeRedis()
    client.index("java", "https://en.wikipedia.org/wiki/Java", "12")
    client.index("java", "https://en.wikipedia.org/wiki/Coffee", "3")
    client.index("programming", "https://en.wikipedia.org/wiki/Java", "5")
    client.index("programming", "https://en.wikipedia.org/wiki/Python", "7")
    return client


@pytest.fixture
def memory_index() -> MemoryIndex:
    return MemoryIndex({
        "java": {"doc1": 3, "doc2": 1},
        "programming": {"doc2": 2, "doc3": 4},
    })


@pytest.fixture(autouse=True)
def _no_redis_env(monkeypatch):
    monkeypatch.delenv("WIKISEARCH_REDIS_URL", raising=False)
    monkeypatch.delenv("WIKISEARCH_REDIS_URL_FILE", raising=False)
