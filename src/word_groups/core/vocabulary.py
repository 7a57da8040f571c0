"""Vocabulary index: dense ids for distinct normalized forms."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from word_groups.extraction.normalize import normalize_token


@dataclass(frozen=True)
class Vocabulary:
    """Deduplicated word forms plus the text as a sequence of form ids.

    Ids are dense (0..n-1) and follow first-occurrence order.

    Attributes:
        forms: Distinct normalized forms, indexed by id
        text: One id per non-empty normalized token, in input order
        dropped: Number of tokens that normalized to the empty form
    """

    forms: tuple[str, ...]
    text: tuple[int, ...]
    dropped: int = 0
    _ids: Mapping[str, int] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self._ids) != len(self.forms):
            ids = {form: i for i, form in enumerate(self.forms)}
            object.__setattr__(self, "_ids", MappingProxyType(ids))

    @classmethod
    def build(cls, tokens: Iterable[str]) -> Vocabulary:
        """Normalize tokens in a single forward pass and index them."""
        ids: dict[str, int] = {}
        forms: list[str] = []
        text: list[int] = []
        dropped = 0

        for token in tokens:
            form = normalize_token(token)
            if not form:
                dropped += 1
                continue
            form_id = ids.get(form)
            if form_id is None:
                form_id = len(forms)
                ids[form] = form_id
                forms.append(form)
            text.append(form_id)

        return cls(
            forms=tuple(forms),
            text=tuple(text),
            dropped=dropped,
            _ids=MappingProxyType(ids),
        )

    def __len__(self) -> int:
        return len(self.forms)

    def __contains__(self, form: object) -> bool:
        return form in self._ids

    def id_of(self, form: str) -> int | None:
        """Exact lookup of a normalized form; None if absent."""
        return self._ids.get(form)

    def form_of(self, form_id: int) -> str:
        return self.forms[form_id]
