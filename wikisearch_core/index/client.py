"""WikiSearch Index Client - Abstract Term Lookup Interface.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable

from wikisearch_core.ranking.policy import PolicyLike
from wikisearch_core.results import ResultSet

logger = logging.getLogger(__name__)

class IndexClient(ABC):
    """Resolves search terms to term-frequency mappings.

    ``lookup`` either returns the complete mapping or raises
    ``IndexUnavailable``; an unindexed term is an empty mapping.
    """

    def __init__(self, max_workers: int = 4):
        self.max_workers = max_workers

    @abstractmethod
    def lookup(self, term: str) -> Dict[str, int]:
        pass

    def lookup_many(self, terms: Iterable[str]) -> Dict[str, Dict[str, int]]:
        """Look up independent terms concurrently.

        Args:
            terms: Terms to resolve

        Returns:
            Mapping of term to its term-frequency mapping
        """
        unique = list(dict.fromkeys(terms))
        if len(unique) <= 1:
            return {term: self.lookup(term) for term in unique}

        workers = max(1, min(self.max_workers, len(unique)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {term: pool.submit(self.lookup, term) for term in unique}
            return {term: future.result() for term, future in futures.items()}

    def search(self, term: str, policy: PolicyLike = None) -> ResultSet:
        """Build the result set for a single term."""
        return ResultSet.from_term(term, self, policy)

    def close(self) -> None:
        pass

    def __enter__(self) -> "IndexClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

__all__ = ["IndexClient"]
