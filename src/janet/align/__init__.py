"""Global alignment of words over segment distances."""

from janet.align.aligner import DEFAULT_GAP_PENALTY, SegmentDistance, WordAligner
from janet.align.result import AlignedPair, Alignment, Operation

__all__ = [
    "AlignedPair",
    "Alignment",
    "DEFAULT_GAP_PENALTY",
    "Operation",
    "SegmentDistance",
    "WordAligner",
]
