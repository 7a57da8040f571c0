"""Tests for token stream reading."""

from __future__ import annotations

import pytest

from word_groups.extraction.tokens import (
    InputFormatError,
    TokenStream,
    iter_tokens,
    read_token_stream,
)


class TestIterTokens:
    def test_splits_on_any_whitespace(self) -> None:
        lines = ["2 cat\n", "  dog\tcats  \n", "\n"]
        assert list(iter_tokens(lines)) == ["2", "cat", "dog", "cats"]

    def test_empty_input(self) -> None:
        assert list(iter_tokens([])) == []


class TestReadTokenStream:
    """Tests for splitting the window token from the words."""

    def test_window_and_words(self) -> None:
        stream = read_token_stream(["2", "cat", "cats"])
        assert stream == TokenStream(window=2, words=("cat", "cats"))

    def test_window_only(self) -> None:
        stream = read_token_stream(["0"])
        assert stream.window == 0
        assert stream.words == ()

    def test_empty_stream(self) -> None:
        """No tokens at all is not an error."""
        stream = read_token_stream([])
        assert stream.window == 0
        assert stream.words == ()

    def test_consumes_generator(self) -> None:
        stream = read_token_stream(iter_tokens(["5 a b", "c"]))
        assert stream.window == 5
        assert stream.words == ("a", "b", "c")

    def test_non_integer_window(self) -> None:
        with pytest.raises(InputFormatError, match="integer"):
            read_token_stream(["cat", "cats"])

    def test_negative_window(self) -> None:
        with pytest.raises(InputFormatError, match=">= 0"):
            read_token_stream(["-1", "cat"])

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            read_token_stream(["1.5"])
