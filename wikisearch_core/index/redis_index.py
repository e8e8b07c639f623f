"""WikiSearch Redis Index - Redis-Backed Index Client.

Reads the term-frequency index written by the crawler/indexer:

    URLSet:<term>           set of document URLs containing the term
    TermCounter:<doc_id>    hash of term -> occurrence count in that document

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import redis
from redis.exceptions import RedisError

from wikisearch_core.errors import IndexUnavailable
from wikisearch_core.index.client import IndexClient

if TYPE_CHECKING:
    from wikisearch_core.config import StoreConfig

logger = logging.getLogger(__name__)

URL_SET_PREFIX = "URLSet:"
TERM_COUNTER_PREFIX = "TermCounter:"


def _decode(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


class RedisIndex(IndexClient):
    """Index client backed by a Redis server.

    Accepts any client exposing the redis-py command API, so a configured
    ``redis.Redis`` (see ``from_config``) or a cluster client both work.
    """

    def __init__(
        self,
        client: Any,
        key_prefix: str = "",
        max_workers: int = 4,
    ):
        """Initialize Redis index.

        Args:
            client: redis-py compatible client
            key_prefix: Namespace prepended to every key
            max_workers: Thread pool size for ``lookup_many``
        """
        super().__init__(max_workers)
        self._client = client
        self.key_prefix = key_prefix

    @classmethod
    def from_config(cls, config: "StoreConfig", verify: bool = True) -> "RedisIndex":
        """Create a client from store configuration.

        Args:
            config: Parsed store configuration
            verify: Ping the server before returning

        Returns:
            Connected Redis index
        """
        client = redis.Redis(**config.to_redis_kwargs())
        index = cls(client, key_prefix=config.key_prefix)
        logger.info(f"Created Redis index client for {config.host}:{config.port}/{config.db}")
        if verify:
            try:
                index.ping()
            except IndexUnavailable:
                index.close()
                raise
        return index

    def url_set_key(self, term: str) -> str:
        return f"{self.key_prefix}{URL_SET_PREFIX}{term}"

    def term_counter_key(self, doc_id: str) -> str:
        return f"{self.key_prefix}{TERM_COUNTER_PREFIX}{doc_id}"

    def ping(self) -> bool:
        """Check that the server is reachable."""
        try:
            return bool(self._client.ping())
        except RedisError as e:
            logger.error(f"Redis ping failed: {e}")
            raise IndexUnavailable(f"Redis server unreachable: {e}") from e

    def term_count(self, term: str) -> int:
        """Get the number of documents containing a term."""
        try:
            return int(self._client.scard(self.url_set_key(term)))
        except RedisError as e:
            logger.error(f"Document count for {term!r} failed: {e}")
            raise IndexUnavailable(f"Document count for {term!r} failed: {e}", term=term) from e

    def lookup(self, term: str) -> Dict[str, int]:
        """Get term counts for every document containing ``term``.

        Args:
            term: Search term

        Returns:
            Mapping of document URL to term frequency; empty if unindexed
        """
        try:
            doc_ids: List[str] = [_decode(d) for d in self._client.smembers(self.url_set_key(term))]
            if not doc_ids:
                logger.debug(f"Term not indexed: {term!r}")
                return {}

            pipe = self._client.pipeline(transaction=False)
            for doc_id in doc_ids:
                pipe.hget(self.term_counter_key(doc_id), term)
            raw_counts = pipe.execute()
        except RedisError as e:
            logger.error(f"Lookup for {term!r} failed: {e}")
            raise IndexUnavailable(f"Lookup for {term!r} failed: {e}", term=term) from e

        counts: Dict[str, int] = {}
        for doc_id, raw in zip(doc_ids, raw_counts):
            counts[doc_id] = self._parse_count(term, doc_id, raw)

        logger.debug(f"Lookup {term!r}: {len(counts)} documents")
        return counts

    def _parse_count(self, term: str, doc_id: str, raw: Optional[Any]) -> int:
        if raw is None:
            return 0
        try:
            count = int(raw)
        except (TypeError, ValueError) as e:
            raise IndexUnavailable(
                f"Malformed count {raw!r} for {term!r} in {doc_id}", term=term
            ) from e
        if count < 0:
            raise IndexUnavailable(f"Negative count {count} for {term!r} in {doc_id}", term=term)
        return count

    def close(self) -> None:
        try:
            self._client.close()
        except RedisError as e:
            logger.warning(f"Error closing Redis connection: {e}")
        logger.info("Redis index client closed")


__all__ = ["RedisIndex", "URL_SET_PREFIX", "TERM_COUNTER_PREFIX"]
