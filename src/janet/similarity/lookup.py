"""DistanceLookup: segment-pair distances for the word aligner."""

from __future__ import annotations

import math
from typing import Iterable, Mapping

from janet.similarity.metric import SimilarityMatrix


DEFAULT_DISTANCE = 1.0
"""Distance for pairs absent from the lookup: fully dissimilar."""


class DistanceLookup:
    """Symmetric ``(segment1, segment2) -> distance`` mapping.

    Distances are ``1 - similarity``. Every pair is stored under both
    orderings when the lookup is built, so ``distance(a, b)`` and
    ``distance(b, a)`` always agree. Pairs never seen resolve to
    ``default`` (1.0 unless overridden) rather than raising.

    Args:
        distances: Initial ``{(a, b): distance}`` entries. Symmetrized.
        default: Distance returned for unmapped pairs.

    Raises:
        ValueError: If ``(a, b)`` and ``(b, a)`` are given different
            distances, or a distance is negative or not finite.
    """

    def __init__(
        self,
        distances: Mapping[tuple[str, str], float] | None = None,
        default: float = DEFAULT_DISTANCE,
    ) -> None:
        if not math.isfinite(default) or default < 0:
            raise ValueError(f"Default distance must be finite and >= 0, got {default}")
        self._default = float(default)
        self._table: dict[tuple[str, str], float] = {}
        if distances:
            for (a, b), dist in distances.items():
                self._insert(a, b, dist)

    def _insert(self, a: str, b: str, dist: float) -> None:
        dist = float(dist)
        if not math.isfinite(dist) or dist < 0:
            raise ValueError(f"Invalid distance {dist} for {a!r}/{b!r}")
        for key in ((a, b), (b, a)):
            existing = self._table.get(key)
            if existing is not None and not math.isclose(
                existing, dist, rel_tol=0.0, abs_tol=1e-9
            ):
                raise ValueError(
                    f"Conflicting distances for {a!r}/{b!r}: {existing} and {dist}"
                )
            self._table[key] = dist

    @classmethod
    def from_similarity_rows(
        cls,
        rows: Iterable[tuple[str, str, float]],
        default: float = DEFAULT_DISTANCE,
    ) -> DistanceLookup:
        """Build from ``(segment1, segment2, similarity)`` rows."""
        lookup = cls(default=default)
        for seg1, seg2, sim in rows:
            lookup._insert(seg1, seg2, 1.0 - float(sim))
        return lookup

    @classmethod
    def from_matrix(
        cls,
        matrix: SimilarityMatrix,
        precision: int | None = None,
        default: float = DEFAULT_DISTANCE,
    ) -> DistanceLookup:
        """Build directly from a SimilarityMatrix (gap rows included)."""
        return cls.from_similarity_rows(
            matrix.rows(precision=precision, include_gap=True), default=default
        )

    @property
    def default(self) -> float:
        return self._default

    def distance(self, seg1: str, seg2: str) -> float:
        """Distance between two segments, ``default`` when unmapped."""
        return self._table.get((seg1, seg2), self._default)

    def __contains__(self, pair: object) -> bool:
        return pair in self._table

    def __len__(self) -> int:
        return len(self._table)

    def is_symmetric(self) -> bool:
        return all(
            self._table.get((b, a)) == dist for (a, b), dist in self._table.items()
        )
