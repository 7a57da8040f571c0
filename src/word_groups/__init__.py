"""word-groups - cluster near-variant word forms and score their proximity."""

from word_groups.core.vocabulary import Vocabulary
from word_groups.engine.config import GroupingConfig
from word_groups.engine.pipeline import (
    GroupingPipeline,
    GroupingReport,
    GroupingResult,
    group_tokens,
)
from word_groups.engine.reporting import ClusterScore
from word_groups.extraction.normalize import normalize_token
from word_groups.extraction.tokens import InputFormatError, read_token_stream

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ClusterScore",
    "GroupingConfig",
    "GroupingPipeline",
    "GroupingReport",
    "GroupingResult",
    "InputFormatError",
    "Vocabulary",
    "group_tokens",
    "normalize_token",
    "read_token_stream",
]
