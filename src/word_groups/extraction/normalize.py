"""Token normalization to canonical word forms."""

from __future__ import annotations

import re
import string

# Characters a normalized form may contain
NORMALIZED_ALPHABET: frozenset[str] = frozenset(string.ascii_lowercase + "'")

_DISCARD_RE = re.compile(r"[^A-Za-z']+")


def normalize_token(raw: str) -> str:
    """Project a raw token onto lowercase ASCII letters and apostrophes.

    Every other character (digits, punctuation, symbols, non-ASCII letters)
    is discarded; the relative order of kept characters is preserved.

    Args:
        raw: Token as read from the input stream

    Returns:
        The normalized form, possibly empty
    """
    return _DISCARD_RE.sub("", raw).lower()
