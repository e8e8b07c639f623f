"""WikiSearch - Boolean Relevance Search over a Redis Term Index.

Answers AND / OR / MINUS queries over term-frequency counts stored in
Redis and returns documents ranked by relevance.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                            WikiSearch Core                                  │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Result Set Algebra                           │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │  OR/union  │  │ AND/inter. │  │   MINUS    │  │    Sort    │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   │                 ┌─────────────────────────────┐                     │   │
│   │                 │  Combine Policy (sum, max)  │                     │   │
│   │                 └─────────────────────────────┘                     │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Index Clients                                │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────────────────────┐    │   │
│   │  │   Redis    │  │   Memory   │  │  Store Config (redis URL)  │    │   │
│   │  └────────────┘  └────────────┘  └────────────────────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Key Features:
- Set union, intersection and difference with summed term frequencies
- Pluggable relevance combination policy
- Stable ascending / descending ranking
- Redis-backed term lookups with concurrent multi-term fetch

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core
from wikisearch_core.results import (
    ResultSet,
    Entry,
    format_entries,
    explain,
)

# Ranking
from wikisearch_core.ranking.policy import (
    CombinePolicy,
    SumPolicy,
    MaxPolicy,
    WeightConfig,
    WeightedSumPolicy,
    FunctionPolicy,
    resolve_policy,
)

# Index
from wikisearch_core.index.client import IndexClient
from wikisearch_core.index.memory import MemoryIndex
from wikisearch_core.index.redis_index import RedisIndex

# Configuration
from wikisearch_core.config import (
    StoreConfig,
    load_store_config,
    make_index,
)

# Errors
from wikisearch_core.errors import (
    WikiSearchError,
    IndexUnavailable,
    ConfigurationMissing,
)

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "ResultSet",
    "Entry",
    "format_entries",
    "explain",
    # Ranking
    "CombinePolicy",
    "SumPolicy",
    "MaxPolicy",
    "WeightConfig",
    "WeightedSumPolicy",
    "FunctionPolicy",
    "resolve_policy",
    # Index
    "IndexClient",
    "MemoryIndex",
    "RedisIndex",
    # Configuration
    "StoreConfig",
    "load_store_config",
    "make_index",
    # Errors
    "WikiSearchError",
    "IndexUnavailable",
    "ConfigurationMissing",
]
