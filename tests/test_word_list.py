"""Tests for word list loading and segment validation."""

from __future__ import annotations

import logging

import pytest

from janet.errors import MalformedInputError
from janet.lexicon.loader import read_word_list, unique_words, validate_words


def _write(tmp_path, text: str):
    path = tmp_path / "words.tsv"
    path.write_text(text, encoding="utf-8")
    return path


class TestUniqueWords:
    def test_keeps_first_occurrence_order(self):
        assert unique_words(["ta", "pa", "ta", "ab", "pa"]) == ["ta", "pa", "ab"]


class TestReadWordList:
    def test_with_header(self, word_file):
        assert read_word_list(word_file) == ["pata", "bata", "tap", "ab"]

    def test_without_header_warns(self, tmp_path, caplog):
        path = _write(tmp_path, "pata\nbata\n")
        with caplog.at_level(logging.WARNING, logger="janet.lexicon.loader"):
            assert read_word_list(path) == ["pata", "bata"]
        assert "lemma" in caplog.text

    def test_strips_whitespace_and_blank_lines(self, tmp_path):
        path = _write(tmp_path, "lemma\n  pata \n\n\tbata\n")
        assert read_word_list(path) == ["pata", "bata"]

    def test_validates_against_inventory(self, word_file, toy_inventory):
        assert read_word_list(word_file, inventory=toy_inventory) == [
            "pata", "bata", "tap", "ab",
        ]

    def test_unknown_segment_reports_location(self, tmp_path, toy_inventory):
        path = _write(tmp_path, "lemma\npata\nkata\n")
        with pytest.raises(MalformedInputError) as exc_info:
            read_word_list(path, inventory=toy_inventory)
        err = exc_info.value
        assert err.value == "k"
        assert err.line == 3
        assert "kata" in str(err)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_word_list(tmp_path / "nope.tsv")

    def test_empty_file(self, tmp_path):
        with pytest.raises(MalformedInputError, match="empty"):
            read_word_list(_write(tmp_path, ""))

    def test_header_only(self, tmp_path):
        with pytest.raises(MalformedInputError, match="no words"):
            read_word_list(_write(tmp_path, "lemma\n"))

    def test_multiple_columns_rejected(self, tmp_path):
        with pytest.raises(MalformedInputError, match="single column"):
            read_word_list(_write(tmp_path, "lemma\npata\tbata\n"))


class TestValidateWords:
    def test_valid_words(self, toy_inventory):
        validate_words(["pata", "ab", ""], toy_inventory)

    def test_first_unknown_segment_raises(self, toy_inventory):
        with pytest.raises(MalformedInputError) as exc_info:
            validate_words(["pata", "bad"], toy_inventory)
        assert exc_info.value.value == "d"
        assert exc_info.value.line == 2

    def test_segment_sequences(self, toy_inventory):
        validate_words([("p", "a"), ["t", "a", "p"]], toy_inventory)
        with pytest.raises(MalformedInputError) as exc_info:
            validate_words([("k", "a")], toy_inventory)
        assert exc_info.value.value == "k"
        assert "ka" in str(exc_info.value)

    def test_explicit_line_numbers(self, toy_inventory):
        with pytest.raises(MalformedInputError) as exc_info:
            validate_words(["pata", "bad"], toy_inventory, lines=[4, 9])
        assert exc_info.value.line == 9
