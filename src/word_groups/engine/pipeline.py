"""Grouping pipeline: tokens -> vocabulary -> clusters -> scores -> report.

Each phase completes before the next begins, and every structure a run
builds (id map, mask map, forest) belongs to that run alone.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from word_groups.core.vocabulary import Vocabulary
from word_groups.engine.config import GroupingConfig
from word_groups.engine.equivalence import EquivalenceBuilder
from word_groups.engine.reporting import ClusterScore, format_line, rank_clusters
from word_groups.engine.scoring import score_clusters
from word_groups.extraction.tokens import read_token_stream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupingReport:
    """Summary of one grouping run.

    Attributes:
        tokens_read: Word tokens consumed (window token excluded)
        tokens_dropped: Tokens that normalized to the empty form
        vocabulary_size: Distinct normalized forms
        masks_generated: Wildcard masks produced
        mask_unions: Merges from the single-substitution rule
        suffix_unions: Merges from the suffix-trim rule
        cluster_count: Clusters in the forest
        scored_clusters: Clusters with a nonzero occurrence count
    """

    tokens_read: int = 0
    tokens_dropped: int = 0
    vocabulary_size: int = 0
    masks_generated: int = 0
    mask_unions: int = 0
    suffix_unions: int = 0
    cluster_count: int = 0
    scored_clusters: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "tokens_read": self.tokens_read,
            "tokens_dropped": self.tokens_dropped,
            "vocabulary_size": self.vocabulary_size,
            "masks_generated": self.masks_generated,
            "mask_unions": self.mask_unions,
            "suffix_unions": self.suffix_unions,
            "cluster_count": self.cluster_count,
            "scored_clusters": self.scored_clusters,
        }


@dataclass(frozen=True)
class GroupingResult:
    """Ranked clusters plus the run report."""

    clusters: tuple[ClusterScore, ...]
    report: GroupingReport
    window: int = 0

    def lines(self) -> list[str]:
        """Output lines in report order, ``<representative>: <count>``."""
        return [format_line(c) for c in self.clusters]

    def to_dict(self) -> dict[str, Any]:
        return {
            "window": self.window,
            "clusters": [c.to_dict() for c in self.clusters],
            "report": self.report.to_dict(),
        }


class GroupingPipeline:
    """Runs the full grouping pipeline for one configuration."""

    def __init__(self, config: GroupingConfig | None = None) -> None:
        self._config = config or GroupingConfig()

    @property
    def config(self) -> GroupingConfig:
        return self._config

    def run(self, words: Iterable[str]) -> GroupingResult:
        """Group and score raw word tokens (no leading window token).

        Args:
            words: Raw word tokens in input order

        Returns:
            GroupingResult with clusters sorted for output
        """
        window = self._config.window
        vocabulary = Vocabulary.build(words)
        tokens_read = len(vocabulary.text) + vocabulary.dropped
        logger.debug(
            "Vocabulary built: %d tokens, %d dropped, %d distinct forms",
            tokens_read,
            vocabulary.dropped,
            len(vocabulary),
        )

        if len(vocabulary) == 0:
            return GroupingResult(
                clusters=(),
                report=GroupingReport(tokens_read=tokens_read, tokens_dropped=vocabulary.dropped),
                window=window,
            )

        forest, stats = EquivalenceBuilder(vocabulary, self._config).build()
        scores = score_clusters(vocabulary, forest, window)
        clusters = rank_clusters(vocabulary, forest, scores)

        report = GroupingReport(
            tokens_read=tokens_read,
            tokens_dropped=vocabulary.dropped,
            vocabulary_size=len(vocabulary),
            masks_generated=stats.masks_generated,
            mask_unions=stats.mask_unions,
            suffix_unions=stats.suffix_unions,
            cluster_count=len(vocabulary) - stats.mask_unions - stats.suffix_unions,
            scored_clusters=len(clusters),
        )
        logger.info(
            "Grouped %d forms into %d clusters, %d reported",
            report.vocabulary_size,
            report.cluster_count,
            report.scored_clusters,
        )
        return GroupingResult(clusters=tuple(clusters), report=report, window=window)


def group_tokens(tokens: Iterable[str], config: GroupingConfig | None = None) -> GroupingResult:
    """Run the pipeline on a full token stream whose first token is the window.

    The window from the stream overrides ``config.window``.

    Raises:
        InputFormatError: If the first token is not a non-negative integer.
    """
    stream = read_token_stream(tokens)
    base = config or GroupingConfig()
    return GroupingPipeline(base.with_window(stream.window)).run(stream.words)
