"""Reporting: representatives, ordering and line formatting."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from word_groups.core.vocabulary import Vocabulary
from word_groups.engine.clustering import UnionFind


@dataclass(frozen=True)
class ClusterScore:
    """One reported cluster.

    Attributes:
        representative: Lexicographically smallest member form
        count: Occurrences lying within the window of another occurrence
        root: Disjoint-set root id of the cluster
        members: All member forms, in first-occurrence order
    """

    representative: str
    count: int
    root: int = -1
    members: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "representative": self.representative,
            "count": self.count,
            "members": list(self.members),
        }


def pick_representatives(
    vocabulary: Vocabulary,
    forest: UnionFind,
    scores: Mapping[int, int],
) -> dict[int, str]:
    """Pick the smallest form (plain string order) of every scored cluster."""
    representatives: dict[int, str] = {}
    for form_id, form in enumerate(vocabulary.forms):
        root = forest.find(form_id)
        if root not in scores:
            continue
        current = representatives.get(root)
        if current is None or form < current:
            representatives[root] = form
    return representatives


def rank_clusters(
    vocabulary: Vocabulary,
    forest: UnionFind,
    scores: Mapping[int, int],
) -> list[ClusterScore]:
    """Build and sort result records: count descending, representative ascending."""
    representatives = pick_representatives(vocabulary, forest, scores)

    members: dict[int, list[str]] = {root: [] for root in scores}
    for form_id, form in enumerate(vocabulary.forms):
        bucket = members.get(forest.find(form_id))
        if bucket is not None:
            bucket.append(form)

    results = [
        ClusterScore(
            representative=representatives[root],
            count=count,
            root=root,
            members=tuple(members[root]),
        )
        for root, count in scores.items()
    ]
    results.sort(key=lambda r: (-r.count, r.representative))
    return results


def format_line(score: ClusterScore) -> str:
    return f"{score.representative}: {score.count}"
