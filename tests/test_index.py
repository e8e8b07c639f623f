from __future__ import annotations

import pytest

from wikisearch_core.errors import IndexUnavailable
from wikisearch_core.index.memory import MemoryIndex
from wikisearch_core.index.redis_index import RedisIndex
from wikisearch_core.results import ResultSet

JAVA = "https://en.wikipedia.org/wiki/Java"
COFFEE = "https://en.wikipedia.org/wiki/Coffee"
PYTHON = "https://en.wikipedia.org/wiki/Python"


def test_memory_lookup_and_unindexed_term(memory_index) -> None:
    assert memory_index.lookup("java") == {"doc1": 3, "doc2": 1}
    assert memory_index.lookup("cobol") == {}
    assert memory_index.search("cobol") == ResultSet()


def test_memory_lookup_returns_copy(memory_index) -> None:
    memory_index.lookup("java")["doc9"] = 1
    assert "doc9" not in memory_index.lookup("java")


def test_memory_add_rejects_negative_counts() -> None:
    index = MemoryIndex()
    with pytest.raises(ValueError):
        index.add("java", "doc1", -1)


def test_lookup_many(memory_index) -> None:
    counts = memory_index.lookup_many(["java", "programming", "java", "cobol"])
    assert counts == {
        "java": {"doc1": 3, "doc2": 1},
        "programming": {"doc2": 2, "doc3": 4},
        "cobol": {},
    }


def test_search_combines_terms(memory_index) -> None:
    java = memory_index.search("java")
    programming = memory_index.search("programming")
    assert (java & programming).to_dict() == {"doc2": 3}


def test_redis_lookup(fake_redis) -> None:
    index = RedisIndex(fake_redis)
    assert index.lookup("java") == {JAVA: 12, COFFEE: 3}
    assert index.lookup("programming") == {JAVA: 5, PYTHON: 7}
    assert index.term_count("java") == 2


def test_redis_unindexed_term_is_empty(fake_redis) -> None:
    index = RedisIndex(fake_redis)
    assert index.lookup("cobol") == {}
    assert len(ResultSet.from_term("cobol", index)) == 0


def test_redis_bytes_responses(fake_redis) -> None:
    fake_redis.index("bytes", b"https://example.org/a", b"4")
    index = RedisIndex(fake_redis)
    assert index.lookup("bytes") == {"https://example.org/a": 4}


def test_redis_missing_count_is_zero(fake_redis) -> None:
    fake_redis.sets["URLSet:orphan"] = {PYTHON}
    assert RedisIndex(fake_redis).lookup("orphan") == {PYTHON: 0}


def test_redis_key_prefix(fake_redis) -> None:
    fake_redis.sets["wiki:URLSet:java"] = {JAVA}
    fake_redis.hashes["wiki:TermCounter:" + JAVA] = {"java": "9"}
    index = RedisIndex(fake_redis, key_prefix="wiki:")
    assert index.url_set_key("java") == "wiki:URLSet:java"
    assert index.lookup("java") == {JAVA: 9}


def test_redis_connection_failure(fake_redis) -> None:
    fake_redis.down = True
    index = RedisIndex(fake_redis)

    with pytest.raises(IndexUnavailable) as excinfo:
        index.lookup("java")
    assert excinfo.value.term == "java"

    with pytest.raises(IndexUnavailable):
        index.ping()
    with pytest.raises(IndexUnavailable):
        index.lookup_many(["java", "programming"])


@pytest.mark.parametrize("raw", ["many", "-2"])
def test_redis_malformed_counts(fake_redis, raw) -> None:
    fake_redis.index("broken", PYTHON, raw)
    with pytest.raises(IndexUnavailable):
        RedisIndex(fake_redis).lookup("broken")


def test_redis_close(fake_redis) -> None:
    with RedisIndex(fake_redis) as index:
        assert index.ping()
    assert fake_redis.closed
