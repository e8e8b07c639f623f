from __future__ import annotations

import io

from wikisearch_core import cli
from wikisearch_core.index.redis_index import RedisIndex
from wikisearch_core.results import ResultSet


def test_build_queries(memory_index) -> None:
    queries = dict(cli.build_queries(memory_index, "java", "programming"))
    assert queries["java AND programming"].to_dict() == {"doc2": 3}
    assert queries["java OR programming"].to_dict() == {"doc1": 3, "doc2": 3, "doc3": 4}
    assert queries["java MINUS programming"].to_dict() == {"doc1": 3}


def test_render(memory_index) -> None:
    queries = cli.build_queries(memory_index, "java", "programming")
    lines = list(cli.render(queries))
    assert lines[:4] == ["", "=== Query: java ===", "(doc2, 1)", "(doc1, 3)"]
    assert "=== Query: java MINUS programming ===" in lines


def test_render_top(memory_index) -> None:
    queries = cli.build_queries(memory_index, "java", "programming")[3:4]
    assert list(cli.render(queries, top=1)) == ["", "=== Query: java OR programming ===", "(doc3, 4)"]
    assert list(cli.render(queries, descending=True, top=2))[2:] == ["(doc3, 4)", "(doc1, 3)"]
    assert list(cli.render(queries, top=0))[2:] == []


def test_main_missing_configuration(tmp_path) -> None:
    code = cli.main(["java", "programming", "--config", str(tmp_path / "none.txt")])
    assert code == cli.EXIT_CONFIGURATION_MISSING


def test_main_bad_url() -> None:
    assert cli.main(["java", "programming", "--url", "redis://"]) == cli.EXIT_CONFIGURATION_MISSING


def test_main_runs_queries(monkeypatch, fake_redis) -> None:
    monkeypatch.setattr(cli, "make_index", lambda path=None, url=None: RedisIndex(fake_redis))
    out = io.StringIO()

    assert cli.main(["java", "programming", "--descending"], out=out) == cli.EXIT_OK
    text = out.getvalue()
    assert "=== Query: java AND programming ===\n(https://en.wikipedia.org/wiki/Java, 17)" in text
    assert fake_redis.closed


def test_main_index_unavailable(monkeypatch, fake_redis) -> None:
    fake_redis.down = True
    monkeypatch.setattr(cli, "make_index", lambda path=None, url=None: RedisIndex(fake_redis))
    assert cli.main(["java", "programming"]) == cli.EXIT_INDEX_UNAVAILABLE


def test_render_top_larger_than_result() -> None:
    queries = [("q", ResultSet({"x": 5, "y": 1, "z": 3}))]
    assert list(cli.render(queries, top=4))[2:] == ["(y, 1)", "(z, 3)", "(x, 5)"]
    assert list(cli.render(queries, top=5, descending=True))[2:] == ["(x, 5)", "(z, 3)", "(y, 1)"]
