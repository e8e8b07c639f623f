"""WikiSearch Index Clients.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from wikisearch_core.index.client import IndexClient
from wikisearch_core.index.memory import MemoryIndex
from wikisearch_core.index.redis_index import RedisIndex

__all__ = ["IndexClient", "MemoryIndex", "RedisIndex"]
