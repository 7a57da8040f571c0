"""Extraction modules for reading and normalizing input tokens."""

from word_groups.extraction.normalize import NORMALIZED_ALPHABET, normalize_token
from word_groups.extraction.tokens import (
    InputFormatError,
    TokenStream,
    iter_tokens,
    read_token_stream,
)

__all__ = [
    # Normalization
    "NORMALIZED_ALPHABET",
    "normalize_token",
    # Token stream
    "InputFormatError",
    "TokenStream",
    "iter_tokens",
    "read_token_stream",
]
