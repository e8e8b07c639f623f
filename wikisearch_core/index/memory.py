"""WikiSearch Memory Index - In-Memory Index Client.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from typing import Dict, List, Mapping, Optional
from wikisearch_core.index.client import IndexClient

class MemoryIndex(IndexClient):
    """In-memory index client."""

    def __init__(self, counts: Optional[Mapping[str, Mapping[str, int]]] = None, max_workers: int = 4):
        super().__init__(max_workers)
        self._counts: Dict[str, Dict[str, int]] = {}
        for term, docs in (counts or {}).items():
            for doc_id, count in docs.items():
                self.add(term, doc_id, count)

    def add(self, term: str, doc_id: str, count: int = 1) -> None:
        if count < 0:
            raise ValueError(f"Term count must be non-negative, got {count} for {term!r} in {doc_id}")
        self._counts.setdefault(term, {})[doc_id] = count

    def lookup(self, term: str) -> Dict[str, int]:
        return dict(self._counts.get(term, {}))

    def terms(self) -> List[str]:
        return list(self._counts.keys())

    def clear(self) -> None:
        self._counts.clear()

__all__ = ["MemoryIndex"]
