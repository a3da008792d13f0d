"""Shared test fixtures for janet."""

from pathlib import Path

import pytest

from janet.inventory.models import SegmentInventory


TOY_FEATURES = ["cons", "son", "voice", "labial", "coronal"]

TOY_MATRIX = """segment\tcons\tson\tvoice\tlabial\tcoronal
p\t1\t0\t0\t1\t0
b\t1\t0\t1\t1\t0
t\t1\t0\t0\t0\t1
a\t0\t1\t1\t0\t0
"""


@pytest.fixture
def toy_inventory() -> SegmentInventory:
    """The four-segment p/b/t/a inventory, fully specified."""
    return SegmentInventory.from_rows(
        TOY_FEATURES,
        {
            "p": {"cons": 1, "son": 0, "voice": 0, "labial": 1, "coronal": 0},
            "b": {"cons": 1, "son": 0, "voice": 1, "labial": 1, "coronal": 0},
            "t": {"cons": 1, "son": 0, "voice": 0, "labial": 0, "coronal": 1},
            "a": {"cons": 0, "son": 1, "voice": 1, "labial": 0, "coronal": 0},
        },
    )


@pytest.fixture
def stops_inventory() -> SegmentInventory:
    """p/b/t/d/a: labial and coronal stops mirror each other."""
    return SegmentInventory.from_rows(
        TOY_FEATURES,
        {
            "p": {"cons": 1, "son": 0, "voice": 0, "labial": 1, "coronal": 0},
            "b": {"cons": 1, "son": 0, "voice": 1, "labial": 1, "coronal": 0},
            "t": {"cons": 1, "son": 0, "voice": 0, "labial": 0, "coronal": 1},
            "d": {"cons": 1, "son": 0, "voice": 1, "labial": 0, "coronal": 1},
            "a": {"cons": 0, "son": 1, "voice": 1},
        },
    )


@pytest.fixture
def feature_file(tmp_path: Path) -> Path:
    """The toy inventory written as a TSV feature matrix."""
    path = tmp_path / "features.tsv"
    path.write_text(TOY_MATRIX, encoding="utf-8")
    return path


@pytest.fixture
def word_file(tmp_path: Path) -> Path:
    """A small word list over p/b/t/a, with one duplicate."""
    path = tmp_path / "words.tsv"
    path.write_text("lemma\npata\nbata\ntap\npata\nab\n", encoding="utf-8")
    return path
