"""Configuration for word grouping and proximity scoring."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from word_groups.extraction.normalize import NORMALIZED_ALPHABET


@dataclass(frozen=True)
class GroupingConfig:
    """Configuration for one grouping run.

    Attributes:
        window: Max distance K, in sequence positions, between two
            occurrences for them to count as near each other.
        wildcard: Sentinel substituted into forms when masking. Must lie
            outside the normalized alphabet.
        suffix_chars: Trailing characters the suffix-trim rule removes.
        min_base_length: Minimum length of a trimmed base for the
            suffix-trim rule to consider it.
        mask_min_length: Minimum form length for the masking rule.
    """

    window: int = 0
    wildcard: str = "*"
    suffix_chars: tuple[str, ...] = ("s", "e")
    min_base_length: int = 2
    mask_min_length: int = 2

    def __post_init__(self) -> None:
        if self.window < 0:
            raise ValueError(f"window must be >= 0, got {self.window}")
        if len(self.wildcard) != 1:
            raise ValueError(f"wildcard must be a single character, got {self.wildcard!r}")
        if self.wildcard in NORMALIZED_ALPHABET:
            raise ValueError(
                f"wildcard must not be a letter or apostrophe, got {self.wildcard!r}"
            )
        for char in self.suffix_chars:
            if len(char) != 1 or char not in NORMALIZED_ALPHABET:
                raise ValueError(
                    f"suffix_chars must be single normalized characters, got {char!r}"
                )
        if self.min_base_length < 1:
            raise ValueError(f"min_base_length must be >= 1, got {self.min_base_length}")
        if self.mask_min_length < 1:
            raise ValueError(f"mask_min_length must be >= 1, got {self.mask_min_length}")

    def with_window(self, window: int) -> GroupingConfig:
        return dataclasses.replace(self, window=window)

    def to_dict(self) -> dict[str, Any]:
        return {
            "window": self.window,
            "wildcard": self.wildcard,
            "suffix_chars": list(self.suffix_chars),
            "min_base_length": self.min_base_length,
            "mask_min_length": self.mask_min_length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GroupingConfig:
        try:
            return cls(
                window=int(data.get("window", 0)),
                wildcard=str(data.get("wildcard", "*")),
                suffix_chars=tuple(str(c) for c in data.get("suffix_chars", ("s", "e"))),
                min_base_length=int(data.get("min_base_length", 2)),
                mask_min_length=int(data.get("mask_min_length", 2)),
            )
        except (ValueError, TypeError):
            return cls()  # Fall back to safe defaults
