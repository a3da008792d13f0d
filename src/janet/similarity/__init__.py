"""Segment similarity from natural classes, and the derived distance lookup."""

from janet.similarity.lookup import DEFAULT_DISTANCE, DistanceLookup
from janet.similarity.metric import (
    SimilarityMatrix,
    class_counts,
    segment_similarity,
)
from janet.similarity.table import read_similarity_table, write_similarity_table

__all__ = [
    "DEFAULT_DISTANCE",
    "DistanceLookup",
    "SimilarityMatrix",
    "class_counts",
    "read_similarity_table",
    "segment_similarity",
    "write_similarity_table",
]
