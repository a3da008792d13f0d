"""Tests for PairwiseDistanceBuilder, WordDistanceTable and its file format."""

from __future__ import annotations

import gzip
import itertools

import numpy as np
import pytest

from janet import word_distances
from janet.align.aligner import WordAligner
from janet.distance.builder import PairwiseDistanceBuilder, WordDistanceTable
from janet.distance.table import read_distance_table, write_distance_table
from janet.errors import MalformedInputError
from janet.similarity.lookup import DistanceLookup


@pytest.fixture
def builder() -> PairwiseDistanceBuilder:
    rows = [(s, s, 1.0) for s in "pbtda"]
    rows += [("p", "b", 0.714), ("t", "d", 0.714)]
    return PairwiseDistanceBuilder(WordAligner(DistanceLookup.from_similarity_rows(rows)))


class TestPairwiseDistanceBuilder:
    def test_deduplicates_words(self, builder):
        table = builder.build(["pata", "bada", "pata", "ta"])
        assert table.words == ("pata", "bada", "ta")
        assert table.num_pairs == 3

    def test_each_unordered_pair_once(self, builder):
        table = builder.build(["pata", "bada", "ta"])
        assert [(w1, w2) for w1, w2, _ in table.pair_distances] == [
            ("pata", "bada"),
            ("pata", "ta"),
            ("bada", "ta"),
        ]

    def test_distances(self, builder):
        table = builder.build(["pata", "bada", "ta"])
        assert table.distance("pata", "bada") == pytest.approx(0.572)
        assert table.distance("pata", "ta") == 2.0

    def test_self_distance_zero(self, builder):
        table = builder.build(["pata", "bada", "ta"])
        for w in table.words:
            assert table.distance(w, w) == 0.0

    def test_symmetric(self, builder):
        table = builder.build(["pata", "bada", "ta", "dap"])
        for w1, w2 in itertools.permutations(table.words, 2):
            assert table.distance(w1, w2) == table.distance(w2, w1)

    def test_rows_layout(self, builder):
        table = builder.build(["pata", "bada", "ta"])
        rows = list(table.rows())
        assert len(rows) == len(table) == 3 + 3 + 3
        assert rows[0][:2] == ("pata", "bada")
        assert rows[3][:2] == ("bada", "pata")
        assert rows[3][2] == rows[0][2]
        assert rows[-3:] == [("pata", "pata", 0.0), ("bada", "bada", 0.0), ("ta", "ta", 0.0)]

    def test_unknown_pair(self, builder):
        table = builder.build(["pata", "bada"])
        with pytest.raises(KeyError):
            table.distance("pata", "tata")

    def test_single_word(self, builder):
        table = builder.build(["pata"])
        assert table.num_pairs == 0
        assert list(table.rows()) == [("pata", "pata", 0.0)]

    def test_to_matrix(self, builder):
        table = builder.build(["pata", "bada", "ta"])
        matrix = table.to_matrix()
        assert matrix.shape == (3, 3)
        np.testing.assert_allclose(matrix, matrix.T)
        np.testing.assert_allclose(np.diag(matrix), 0.0)
        assert matrix[0, 2] == 2.0

    def test_mirrors_one_sided_lookup_correctly(self):
        """A lookup given only (p, b) still prices (b, p) the same."""
        lookup = DistanceLookup({("p", "p"): 0.0, ("b", "b"): 0.0, ("p", "b"): 0.3})
        builder = PairwiseDistanceBuilder(WordAligner(lookup))
        table = builder.build(["bp", "pb"])
        direct = WordAligner(lookup).distance("pb", "bp")
        assert table.distance("bp", "pb") == pytest.approx(direct)
        assert table.distance("pb", "bp") == pytest.approx(direct)


class TestWordDistances:
    def test_end_to_end_in_memory(self, stops_inventory):
        table = word_distances(stops_inventory, ["pata", "bada", "pata"])
        assert table.words == ("pata", "bada")
        assert table.distance("pata", "pata") == 0.0
        assert table.distance("pata", "bada") == table.distance("bada", "pata")
        assert table.distance("pata", "bada") > 0.0

    def test_unknown_segment_fails_before_alignment(self, toy_inventory):
        with pytest.raises(MalformedInputError) as exc_info:
            word_distances(toy_inventory, ["pata", "kata"])
        assert exc_info.value.value == "k"


class TestDistanceTableFile:
    def test_gzip_round_trip(self, tmp_path, builder):
        table = builder.build(["pata", "bada", "ta"])
        path = tmp_path / "dists.tsv.gz"
        assert write_distance_table(table, path) == len(table)
        with gzip.open(path, "rt", encoding="utf-8") as f:
            assert f.readline() == "word1\tword2\tphon_dist\n"
        assert read_distance_table(path) == list(table.rows())

    def test_plain_text(self, tmp_path, builder):
        table = builder.build(["pata", "ta"])
        path = tmp_path / "dists.tsv"
        write_distance_table(table, path)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "word1\tword2\tphon_dist"
        assert lines[1] == "pata\tta\t2.0"

    def test_bad_header(self, tmp_path):
        path = tmp_path / "dists.tsv"
        path.write_text("w1\tw2\td\n", encoding="utf-8")
        with pytest.raises(MalformedInputError, match="header"):
            read_distance_table(path)

    def test_negative_distance(self, tmp_path):
        path = tmp_path / "dists.tsv"
        path.write_text("word1\tword2\tphon_dist\na\tb\t-1\n", encoding="utf-8")
        with pytest.raises(MalformedInputError) as exc_info:
            read_distance_table(path)
        assert exc_info.value.line == 2

    def test_table_is_constructible_directly(self):
        table = WordDistanceTable(words=("a", "b"), pair_distances=(("a", "b", 1.5),))
        assert table.distance("b", "a") == 1.5

    def test_quote_character_in_words(self, tmp_path):
        table = WordDistanceTable(words=('"a', "a"), pair_distances=(('"a', "a", 1.0),))
        path = tmp_path / "dists.tsv.gz"
        write_distance_table(table, path)
        assert read_distance_table(path) == list(table.rows())
