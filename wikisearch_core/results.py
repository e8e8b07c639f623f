"""WikiSearch Result Sets - Boolean Relevance Algebra.

A ResultSet maps document identifiers (canonical URLs) to relevance scores
and combines with other result sets using OR, AND and MINUS.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    NamedTuple,
    Optional,
)

from wikisearch_core.ranking.policy import CombinePolicy, PolicyLike, resolve_policy

if TYPE_CHECKING:
    from wikisearch_core.index.client import IndexClient

logger = logging.getLogger(__name__)


class Entry(NamedTuple):
    """A (document identifier, relevance score) pair from a sorted result."""

    doc_id: str
    score: int

    def __str__(self) -> str:
        return f"({self.doc_id}, {self.score})"


class ResultSet:
    """Scored set of documents.

    Treat instances as values: the scores are copied on construction and
    every combinator returns a new ResultSet. A document that is not
    present has relevance zero.

    Example:
        java = ResultSet.from_term("java", index)
        programming = ResultSet.from_term("programming", index)
        for entry in (java & programming).sorted_entries():
            print(entry)
    """

    __slots__ = ("_scores", "_policy")

    def __init__(
        self,
        scores: Optional[Mapping[str, int]] = None,
        policy: PolicyLike = None,
    ):
        """Initialize result set.

        Args:
            scores: Mapping of document identifier to relevance
            policy: Relevance combination policy (sum by default)
        """
        self._scores: Dict[str, int] = dict(scores or {})
        self._policy: CombinePolicy = resolve_policy(policy)

    @classmethod
    def from_term(
        cls,
        term: str,
        index: "IndexClient",
        policy: PolicyLike = None,
    ) -> "ResultSet":
        """Build the result set for a single search term.

        Args:
            term: Search term
            index: Index client to query
            policy: Relevance combination policy

        Returns:
            Result set, empty when the term is not indexed
        """
        return cls(index.lookup(term), policy)

    @property
    def scores(self) -> Mapping[str, int]:
        """Read-only view of the document scores."""
        return MappingProxyType(self._scores)

    @property
    def policy(self) -> CombinePolicy:
        return self._policy

    def relevance_of(self, doc_id: str) -> int:
        """Get the relevance of a document.

        Args:
            doc_id: Document identifier

        Returns:
            Stored score, or 0 if the document is absent
        """
        return self._scores.get(doc_id, 0)

    def combine(self, left: int, right: int) -> int:
        """Combine two relevance scores with this set's policy."""
        return self._policy.combine(left, right)

    def union(self, other: "ResultSet") -> "ResultSet":
        """OR: documents in either set.

        A document found on both sides gets the combined score; one found
        on a single side keeps its original score.

        Args:
            other: Other result set

        Returns:
            New result set with the union
        """
        union = dict(self._scores)
        for doc_id, score in other._scores.items():
            if doc_id in self._scores:
                union[doc_id] = self.combine(self._scores[doc_id], score)
            else:
                union[doc_id] = score
        return self._derive(union)

    def intersect(self, other: "ResultSet") -> "ResultSet":
        """AND: documents present in both sets, with combined scores.

        Args:
            other: Other result set

        Returns:
            New result set with the intersection
        """
        intersection = {
            doc_id: self.combine(score, other._scores[doc_id])
            for doc_id, score in self._scores.items()
            if doc_id in other._scores
        }
        return self._derive(intersection)

    def difference(self, other: "ResultSet") -> "ResultSet":
        """MINUS: documents of this set that are not keys of the other.

        Scores are kept as they are. Membership decides, so a document
        stored with relevance zero in ``other`` is still removed.

        Args:
            other: Other result set

        Returns:
            New result set with the difference
        """
        difference = {
            doc_id: score
            for doc_id, score in self._scores.items()
            if doc_id not in other._scores
        }
        return self._derive(difference)

    def _derive(self, scores: Dict[str, int]) -> "ResultSet":
        result = type(self).__new__(type(self))
        result._scores = scores
        result._policy = self._policy
        return result

    def sorted_entries(self, descending: bool = False) -> List[Entry]:
        """Sort entries by relevance.

        Ties keep the iteration order of the underlying mapping; no
        secondary key is applied.

        Args:
            descending: Highest relevance first instead of lowest

        Returns:
            Every entry exactly once, ordered by score
        """
        entries = [Entry(doc_id, score) for doc_id, score in self._scores.items()]
        entries.sort(key=lambda e: e.score, reverse=descending)
        return entries

    def top(self, k: int) -> List[Entry]:
        """Get the ``k`` most relevant entries, highest first."""
        if k <= 0:
            return []
        return self.sorted_entries(descending=True)[:k]

    def to_dict(self) -> Dict[str, int]:
        """Convert to a plain dictionary."""
        return dict(self._scores)

    def __or__(self, other: "ResultSet") -> "ResultSet":
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: "ResultSet") -> "ResultSet":
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other: "ResultSet") -> "ResultSet":
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self.difference(other)

    def __len__(self) -> int:
        return len(self._scores)

    def __bool__(self) -> bool:
        return bool(self._scores)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._scores

    def __iter__(self) -> Iterator[str]:
        return iter(self._scores)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self._scores == other._scores

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ResultSet({self._scores!r}, policy={self._policy!r})"


def format_entries(entries: List[Entry]) -> Iterator[str]:
    """Render sorted entries as ``(doc_id, score)`` lines."""
    for entry in entries:
        yield str(entry)


def explain(result: ResultSet, other: ResultSet, doc_id: str) -> Dict[str, Any]:
    """Explain how a document's score would combine across two sets."""
    left = result.relevance_of(doc_id)
    right = other.relevance_of(doc_id)
    details = result.policy.explain(left, right)
    details["doc_id"] = doc_id
    return details


__all__ = ["ResultSet", "Entry", "format_entries", "explain"]
