"""Natural-class similarity between segments.

similarity(a, b) = shared / (shared + non_shared), where ``shared``
counts classes containing both segments and ``non_shared`` counts
classes containing exactly one of them.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from janet.classes.generator import generate_natural_classes
from janet.classes.models import NaturalClass
from janet.inventory.models import GAP_SYMBOL, SegmentInventory


logger = logging.getLogger(__name__)


def class_counts(
    seg1: str, seg2: str, classes: Iterable[NaturalClass]
) -> tuple[int, int]:
    """Return ``(shared, non_shared)`` class counts for a segment pair."""
    shared = 0
    non_shared = 0
    for nc in classes:
        in1 = seg1 in nc.members
        in2 = seg2 in nc.members
        if in1 and in2:
            shared += 1
        elif in1 or in2:
            non_shared += 1
    return shared, non_shared


def segment_similarity(
    seg1: str, seg2: str, classes: Iterable[NaturalClass]
) -> float:
    """Natural-class similarity of two segments, in [0, 1].

    Returns 0.0 when neither segment belongs to any class.
    """
    shared, non_shared = class_counts(seg1, seg2, classes)
    if shared + non_shared == 0:
        return 0.0
    return shared / (shared + non_shared)


class SimilarityMatrix:
    """Symmetric segment × segment similarity scores.

    Built once per inventory and read-only afterwards. The diagonal is
    exactly 1.0; the gap symbol is similar (1.0) to everything.

    Args:
        segments: Segment labels, in inventory order.
        scores: ``scores[i][j]`` is the similarity of segments i and j.

    Raises:
        ValueError: If ``scores`` is not square over ``segments`` or is
            not symmetric.
    """

    def __init__(
        self, segments: Iterable[str], scores: list[list[float]]
    ) -> None:
        self._segments = tuple(segments)
        n = len(self._segments)
        if len(scores) != n or any(len(row) != n for row in scores):
            raise ValueError(
                f"Similarity scores must be a {n}x{n} table"
            )
        for i in range(n):
            for j in range(i + 1, n):
                if scores[i][j] != scores[j][i]:
                    raise ValueError(
                        f"Similarity is not symmetric for "
                        f"{self._segments[i]!r}/{self._segments[j]!r}"
                    )
        self._scores = tuple(tuple(float(v) for v in row) for row in scores)
        self._index = {s: i for i, s in enumerate(self._segments)}

    @classmethod
    def from_inventory(
        cls,
        inventory: SegmentInventory,
        classes: list[NaturalClass] | None = None,
    ) -> SimilarityMatrix:
        """Compute similarities for every segment pair of ``inventory``.

        Args:
            inventory: The segment inventory.
            classes: Pre-computed natural classes. Generated from the
                inventory when omitted.
        """
        if classes is None:
            classes = generate_natural_classes(inventory)
        segments = inventory.segments
        n = len(segments)
        scores = [[0.0] * n for _ in range(n)]
        for i in range(n):
            scores[i][i] = 1.0
            for j in range(i + 1, n):
                sim = segment_similarity(segments[i], segments[j], classes)
                scores[i][j] = sim
                scores[j][i] = sim
        logger.info(
            "Computed similarities for %d segments over %d natural classes",
            n, len(classes),
        )
        return cls(segments, scores)

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    def similarity(self, seg1: str, seg2: str) -> float:
        """Similarity of two segments; the gap symbol scores 1.0.

        Raises:
            KeyError: If a segment is not in the matrix.
        """
        if seg1 == GAP_SYMBOL or seg2 == GAP_SYMBOL:
            return 1.0
        try:
            return self._scores[self._index[seg1]][self._index[seg2]]
        except KeyError as exc:
            raise KeyError(f"Unknown segment: {exc.args[0]!r}") from None

    def rows(
        self, precision: int | None = 3, include_gap: bool = True
    ) -> Iterator[tuple[str, str, float]]:
        """Yield ``(segment1, segment2, similarity)`` rows.

        All ordered pairs come first (self pairs included), then, when
        ``include_gap`` is set, every segment against the gap symbol, the
        gap symbol against every segment and the gap against itself, all
        at 1.0.

        Args:
            precision: Decimal places to round to; None keeps full precision.
            include_gap: Whether to append the gap rows.
        """
        for i, seg1 in enumerate(self._segments):
            for j, seg2 in enumerate(self._segments):
                sim = self._scores[i][j]
                if precision is not None:
                    sim = round(sim, precision)
                yield seg1, seg2, sim
        if include_gap:
            for seg in self._segments:
                yield seg, GAP_SYMBOL, 1.0
            for seg in self._segments:
                yield GAP_SYMBOL, seg, 1.0
            yield GAP_SYMBOL, GAP_SYMBOL, 1.0

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self) -> str:
        return f"SimilarityMatrix(segments={len(self._segments)})"
