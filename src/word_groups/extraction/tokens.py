"""Reading the input token stream: a window K followed by words."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class InputFormatError(ValueError):
    """Raised when the leading window token cannot be used."""


@dataclass(frozen=True)
class TokenStream:
    """A parsed token stream.

    Attributes:
        window: Proximity window K, in sequence positions
        words: Raw (not yet normalized) word tokens, in input order
    """

    window: int
    words: tuple[str, ...]


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-delimited tokens from an iterable of lines."""
    for line in lines:
        yield from line.split()


def read_token_stream(tokens: Iterable[str]) -> TokenStream:
    """Split a token stream into its window and its words.

    An empty stream yields window 0 and no words.

    Raises:
        InputFormatError: If the first token is not a non-negative integer.
    """
    it = iter(tokens)
    head = next(it, None)
    if head is None:
        logger.debug("Empty token stream")
        return TokenStream(window=0, words=())

    try:
        window = int(head)
    except ValueError:
        raise InputFormatError(f"window must be an integer, got {head!r}") from None
    if window < 0:
        raise InputFormatError(f"window must be >= 0, got {window}")

    return TokenStream(window=window, words=tuple(it))
