"""Tests for the vocabulary index."""

from __future__ import annotations

import dataclasses

import pytest

from word_groups.core.vocabulary import Vocabulary


class TestVocabularyBuild:
    """Tests for Vocabulary.build."""

    def test_first_occurrence_ids(self) -> None:
        vocab = Vocabulary.build(["Cat", "dog", "cat!", "42", "DOG", "bird"])
        assert vocab.forms == ("cat", "dog", "bird")
        assert vocab.text == (0, 1, 0, 1, 2)
        assert vocab.dropped == 1

    def test_ids_strictly_increasing_on_first_sight(self) -> None:
        vocab = Vocabulary.build("a b a c b d a".split())
        first_seen: list[int] = []
        for form_id in vocab.text:
            if form_id not in first_seen:
                first_seen.append(form_id)
        assert first_seen == list(range(len(vocab)))

    def test_dropped_tokens_take_no_position(self) -> None:
        vocab = Vocabulary.build(["cat", "123", "...", "cat"])
        assert vocab.text == (0, 0)
        assert vocab.dropped == 2

    def test_empty(self) -> None:
        vocab = Vocabulary.build([])
        assert len(vocab) == 0
        assert vocab.text == ()

    def test_all_dropped(self) -> None:
        vocab = Vocabulary.build(["1", "2", "--"])
        assert len(vocab) == 0
        assert vocab.dropped == 3


class TestVocabularyLookup:
    def test_id_of(self) -> None:
        vocab = Vocabulary.build(["cat", "dog"])
        assert vocab.id_of("dog") == 1
        assert vocab.id_of("bird") is None

    def test_lookup_is_exact(self) -> None:
        """Lookup takes normalized forms only."""
        vocab = Vocabulary.build(["Cat"])
        assert vocab.id_of("cat") == 0
        assert vocab.id_of("Cat") is None

    def test_contains_and_len(self) -> None:
        vocab = Vocabulary.build(["cat", "dog", "cat"])
        assert "cat" in vocab
        assert "bird" not in vocab
        assert len(vocab) == 2

    def test_form_of(self) -> None:
        vocab = Vocabulary.build(["cat", "dog"])
        assert vocab.form_of(1) == "dog"

    def test_direct_construction_indexes_forms(self) -> None:
        vocab = Vocabulary(forms=("a", "b"), text=(0, 1, 1))
        assert vocab.id_of("b") == 1

    def test_frozen(self) -> None:
        vocab = Vocabulary.build(["cat"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            vocab.forms = ("dog",)  # type: ignore[misc]
