"""Tests for FeatureValue and SegmentInventory.

No I/O. All inventories are constructed inline.
"""

import pytest

from janet.classes.models import FeatureSpec
from janet.errors import MalformedInputError
from janet.inventory.models import GAP_SYMBOL, FeatureValue, SegmentInventory


class TestFeatureValue:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("", FeatureValue.ABSENT),
            ("  ", FeatureValue.ABSENT),
            ("0", FeatureValue.MINUS),
            ("1", FeatureValue.PLUS),
            ("-", FeatureValue.MINUS),
            ("+", FeatureValue.PLUS),
        ],
    )
    def test_parse(self, raw, expected):
        assert FeatureValue.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["2", "yes", "0.5", "NA"])
    def test_parse_rejects_other_values(self, raw):
        with pytest.raises(ValueError):
            FeatureValue.parse(raw)

    def test_absent_never_satisfies(self):
        """Not applicable is distinct from pinned-to-0."""
        assert not FeatureValue.ABSENT.satisfies(False)
        assert not FeatureValue.ABSENT.satisfies(True)

    def test_defined_values_satisfy_matching_pin(self):
        assert FeatureValue.PLUS.satisfies(True)
        assert not FeatureValue.PLUS.satisfies(False)
        assert FeatureValue.MINUS.satisfies(False)
        assert not FeatureValue.MINUS.satisfies(True)


class TestSegmentInventory:
    def test_basic_properties(self, toy_inventory):
        assert toy_inventory.segments == ("p", "b", "t", "a")
        assert toy_inventory.features == ("cons", "son", "voice", "labial", "coronal")
        assert toy_inventory.size == 4
        assert toy_inventory.feature_count == 5
        assert len(toy_inventory) == 4
        assert "p" in toy_inventory
        assert "z" not in toy_inventory

    def test_value_lookup(self, toy_inventory):
        assert toy_inventory.value("b", "voice") is FeatureValue.PLUS
        assert toy_inventory.value("p", "voice") is FeatureValue.MINUS

    def test_unknown_labels_raise_key_error(self, toy_inventory):
        with pytest.raises(KeyError):
            toy_inventory.value("z", "voice")
        with pytest.raises(KeyError):
            toy_inventory.value("p", "nasal")

    def test_row(self, toy_inventory):
        row = toy_inventory.row("a")
        assert row["son"] is FeatureValue.PLUS
        assert row["cons"] is FeatureValue.MINUS

    def test_fully_specified(self, toy_inventory, stops_inventory):
        assert toy_inventory.is_fully_specified
        assert not stops_inventory.is_fully_specified

    def test_missing_features_are_absent(self, stops_inventory):
        assert stops_inventory.value("a", "labial") is FeatureValue.ABSENT

    def test_extension(self, toy_inventory):
        spec = FeatureSpec.from_dict({"labial": 1})
        assert toy_inventory.extension(spec) == frozenset({"p", "b"})

    def test_extension_excludes_absent(self, stops_inventory):
        """'a' has no labial value, so [labial=0] does not pick it out."""
        spec = FeatureSpec.from_dict({"labial": 0})
        assert stops_inventory.extension(spec) == frozenset({"t", "d"})

    def test_extension_unknown_feature(self, toy_inventory):
        with pytest.raises(KeyError):
            toy_inventory.extension(FeatureSpec.from_dict({"nasal": 1}))

    def test_duplicate_segment_rejected(self):
        with pytest.raises(MalformedInputError, match="Duplicate segment"):
            SegmentInventory(
                segments=("p", "p"),
                features=("voice",),
                values=((FeatureValue.PLUS,), (FeatureValue.MINUS,)),
            )

    def test_duplicate_feature_rejected(self):
        with pytest.raises(MalformedInputError, match="Duplicate feature"):
            SegmentInventory(
                segments=("p",),
                features=("voice", "voice"),
                values=((FeatureValue.PLUS, FeatureValue.PLUS),),
            )

    def test_multi_character_segment_rejected(self):
        with pytest.raises(MalformedInputError, match="single character"):
            SegmentInventory(
                segments=("ts",),
                features=("voice",),
                values=((FeatureValue.PLUS,),),
            )

    def test_gap_symbol_segment_rejected(self):
        with pytest.raises(MalformedInputError, match="gap symbol"):
            SegmentInventory(
                segments=(GAP_SYMBOL,),
                features=("voice",),
                values=((FeatureValue.PLUS,),),
            )

    def test_dimension_mismatch_rejected(self):
        with pytest.raises(ValueError):
            SegmentInventory(
                segments=("p", "b"),
                features=("voice",),
                values=((FeatureValue.PLUS,),),
            )
        with pytest.raises(ValueError):
            SegmentInventory(
                segments=("p",),
                features=("voice", "labial"),
                values=((FeatureValue.PLUS,),),
            )

    def test_from_rows_rejects_unknown_feature(self):
        with pytest.raises(ValueError, match="unknown features"):
            SegmentInventory.from_rows(["voice"], {"p": {"nasal": 1}})

    def test_immutable(self, toy_inventory):
        with pytest.raises(AttributeError):
            toy_inventory.segments = ("x",)
