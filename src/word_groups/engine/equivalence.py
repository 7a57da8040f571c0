"""Equivalence builder: decides which word forms denote the same word.

Two rules, applied once per vocabulary id in id order:

- Single substitution: every form is masked at each position with a
  wildcard; two forms producing the same mask differ by exactly one
  character at that position and are merged. Insertions and deletions
  are not covered ("color" and "colour" stay apart).
- Suffix trim: a form ending in a suffix character (``s`` or ``e`` by
  default) is merged with the form obtained by dropping that character,
  if it exists in the vocabulary. Only checked from the longer form.

Total cost is proportional to the summed length of all forms.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from word_groups.core.vocabulary import Vocabulary
from word_groups.engine.clustering import UnionFind
from word_groups.engine.config import GroupingConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EquivalenceStats:
    """Counters from one equivalence build.

    Attributes:
        masks_generated: Wildcard masks produced across all forms
        mask_unions: Merges caused by a shared mask
        suffix_unions: Merges caused by the suffix-trim rule
    """

    masks_generated: int = 0
    mask_unions: int = 0
    suffix_unions: int = 0


def mask_form(form: str, position: int, wildcard: str = "*") -> str:
    """Replace the character at ``position`` with the wildcard."""
    return form[:position] + wildcard + form[position + 1 :]


class EquivalenceBuilder:
    """Builds the disjoint-set forest over a frozen vocabulary."""

    def __init__(self, vocabulary: Vocabulary, config: GroupingConfig | None = None) -> None:
        self._vocabulary = vocabulary
        self._config = config or GroupingConfig()

    def build(self) -> tuple[UnionFind, EquivalenceStats]:
        vocabulary = self._vocabulary
        config = self._config
        forest = UnionFind(len(vocabulary))
        # mask -> first id that produced it; local to this build
        first_by_mask: dict[str, int] = {}
        masks_generated = mask_unions = suffix_unions = 0

        for form_id, form in enumerate(vocabulary.forms):
            if len(form) >= config.mask_min_length:
                for position in range(len(form)):
                    mask = mask_form(form, position, config.wildcard)
                    masks_generated += 1
                    owner = first_by_mask.setdefault(mask, form_id)
                    if owner != form_id and forest.unite(form_id, owner):
                        mask_unions += 1

            if form[-1] in config.suffix_chars:
                base = form[:-1]
                if len(base) >= config.min_base_length:
                    base_id = vocabulary.id_of(base)
                    if base_id is not None and forest.unite(form_id, base_id):
                        suffix_unions += 1

        stats = EquivalenceStats(
            masks_generated=masks_generated,
            mask_unions=mask_unions,
            suffix_unions=suffix_unions,
        )
        logger.debug(
            "Equivalence built: %d forms, %d masks, %d mask unions, %d suffix unions",
            len(vocabulary),
            masks_generated,
            mask_unions,
            suffix_unions,
        )
        return forest, stats
