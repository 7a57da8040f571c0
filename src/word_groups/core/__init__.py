"""Core data models for word grouping."""

from word_groups.core.vocabulary import Vocabulary

__all__ = ["Vocabulary"]
