"""Word lists: loading, deduplication and segment validation."""

from janet.lexicon.loader import read_word_list, unique_words, validate_words

__all__ = ["read_word_list", "unique_words", "validate_words"]
