"""Occurrence scoring: how often a cluster appears near itself."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from word_groups.core.vocabulary import Vocabulary
from word_groups.engine.clustering import UnionFind

logger = logging.getLogger(__name__)


def group_positions(text: Sequence[int], forest: UnionFind) -> dict[int, list[int]]:
    """Map each cluster root to its text positions, ascending."""
    positions: dict[int, list[int]] = {}
    for position, form_id in enumerate(text):
        positions.setdefault(forest.find(form_id), []).append(position)
    return positions


def count_near_occurrences(positions: Sequence[int], window: int) -> int:
    """Count positions whose previous or next neighbor is within ``window``.

    ``positions`` must be ascending. A position counts at most once.
    """
    size = len(positions)
    if size < 2:
        return 0
    count = 0
    for k in range(size):
        if (k > 0 and positions[k] - positions[k - 1] <= window) or (
            k < size - 1 and positions[k + 1] - positions[k] <= window
        ):
            count += 1
    return count


def score_clusters(vocabulary: Vocabulary, forest: UnionFind, window: int) -> dict[int, int]:
    """Compute occurrence counts per cluster root.

    Returns:
        root -> count, for clusters with a nonzero count only
    """
    scores: dict[int, int] = {}
    for root, positions in group_positions(vocabulary.text, forest).items():
        count = count_near_occurrences(positions, window)
        if count > 0:
            scores[root] = count
    logger.debug("Scored %d clusters with window %d", len(scores), window)
    return scores
