"""Segment inventories: the feature matrix and its loader."""

from janet.inventory.loader import read_feature_matrix
from janet.inventory.models import GAP_SYMBOL, FeatureValue, SegmentInventory

__all__ = [
    "FeatureValue",
    "GAP_SYMBOL",
    "SegmentInventory",
    "read_feature_matrix",
]
