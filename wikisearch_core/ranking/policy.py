"""WikiSearch Combine Policies - Relevance Combination Rules.

A policy decides the relevance of a document that appears on both sides of
an OR or AND. Result sets only ever call ``combine``; swapping the policy
changes scoring without touching the set algebra.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

class CombinePolicy(ABC):
    """Base combine policy."""

    name: str = "base"

    @abstractmethod
    def combine(self, left: int, right: int) -> int:
        pass

    def explain(self, left: int, right: int) -> Dict[str, Any]:
        return {"score": self.combine(left, right), "description": f"{self.name}({left}, {right})"}

    def __call__(self, left: int, right: int) -> int:
        return self.combine(left, right)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

class SumPolicy(CombinePolicy):
    """Sum of term frequencies."""

    name = "sum"

    def combine(self, left: int, right: int) -> int:
        return left + right

class MaxPolicy(CombinePolicy):
    """Highest single-term frequency wins."""

    name = "max"

    def combine(self, left: int, right: int) -> int:
        return max(left, right)

@dataclass
class WeightConfig:
    """Operand weights for weighted sums."""
    left: float = 1.0
    right: float = 1.0

class WeightedSumPolicy(CombinePolicy):
    """Weighted sum, rounded to the nearest integer."""

    name = "weighted"

    def __init__(self, config: Optional[WeightConfig] = None):
        self.config = config or WeightConfig()
        if self.config.left < 0 or self.config.right < 0:
            raise ValueError(f"Weights must be non-negative, got {self.config}")

    def combine(self, left: int, right: int) -> int:
        return int(round(self.config.left * left + self.config.right * right))

    def explain(self, left: int, right: int) -> Dict[str, Any]:
        return {
            "score": self.combine(left, right),
            "description": f"weighted({left}, {right})",
            "details": {"left_weight": self.config.left, "right_weight": self.config.right},
        }

    def __repr__(self) -> str:
        return f"WeightedSumPolicy({self.config})"

class FunctionPolicy(CombinePolicy):
    """Adapts a plain two-argument function."""

    name = "function"

    def __init__(self, func: Callable[[int, int], int]):
        self._func = func
        self.name = getattr(func, "__name__", "function")

    def combine(self, left: int, right: int) -> int:
        return self._func(left, right)

    def __repr__(self) -> str:
        return f"FunctionPolicy({self.name})"

DEFAULT_POLICY = SumPolicy()

_NAMED_POLICIES: Dict[str, Callable[[], CombinePolicy]] = {
    "sum": SumPolicy,
    "max": MaxPolicy,
    "weighted": WeightedSumPolicy,
}

PolicyLike = Union[CombinePolicy, Callable[[int, int], int], str, None]

def resolve_policy(policy: PolicyLike = None) -> CombinePolicy:
    """Turn a name, callable or policy into a CombinePolicy.

    Args:
        policy: ``None`` for the default sum, a registered name, a policy
            instance or any ``(int, int) -> int`` callable

    Returns:
        Policy instance
    """
    if policy is None:
        return DEFAULT_POLICY
    if isinstance(policy, CombinePolicy):
        return policy
    if isinstance(policy, str):
        factory = _NAMED_POLICIES.get(policy.lower())
        if factory is None:
            raise ValueError(f"Unknown combine policy: {policy!r} (expected one of {sorted(_NAMED_POLICIES)})")
        return factory()
    if callable(policy):
        return FunctionPolicy(policy)
    raise TypeError(f"Cannot use {type(policy).__name__} as a combine policy")

__all__ = [
    "CombinePolicy",
    "SumPolicy",
    "MaxPolicy",
    "WeightConfig",
    "WeightedSumPolicy",
    "FunctionPolicy",
    "DEFAULT_POLICY",
    "PolicyLike",
    "resolve_policy",
]
