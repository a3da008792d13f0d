"""Pairwise word distances and their on-disk table."""

from janet.distance.builder import PairwiseDistanceBuilder, WordDistanceTable
from janet.distance.table import read_distance_table, write_distance_table

__all__ = [
    "PairwiseDistanceBuilder",
    "WordDistanceTable",
    "read_distance_table",
    "write_distance_table",
]
