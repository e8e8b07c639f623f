"""WikiSearch Ranking Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from wikisearch_core.ranking.policy import (
    CombinePolicy,
    SumPolicy,
    MaxPolicy,
    WeightConfig,
    WeightedSumPolicy,
    FunctionPolicy,
    DEFAULT_POLICY,
    resolve_policy,
)

__all__ = ["CombinePolicy", "SumPolicy", "MaxPolicy", "WeightConfig", "WeightedSumPolicy", "FunctionPolicy", "DEFAULT_POLICY", "resolve_policy"]
