"""Grouping engine: equivalence, scoring and reporting."""

from word_groups.engine.clustering import UnionFind
from word_groups.engine.config import GroupingConfig
from word_groups.engine.equivalence import EquivalenceBuilder, EquivalenceStats, mask_form
from word_groups.engine.pipeline import (
    GroupingPipeline,
    GroupingReport,
    GroupingResult,
    group_tokens,
)
from word_groups.engine.reporting import (
    ClusterScore,
    format_line,
    pick_representatives,
    rank_clusters,
)
from word_groups.engine.scoring import count_near_occurrences, group_positions, score_clusters

__all__ = [
    # Disjoint set
    "UnionFind",
    # Configuration
    "GroupingConfig",
    # Equivalence
    "EquivalenceBuilder",
    "EquivalenceStats",
    "mask_form",
    # Scoring
    "count_near_occurrences",
    "group_positions",
    "score_clusters",
    # Reporting
    "ClusterScore",
    "format_line",
    "pick_representatives",
    "rank_clusters",
    # Pipeline
    "GroupingPipeline",
    "GroupingReport",
    "GroupingResult",
    "group_tokens",
]
