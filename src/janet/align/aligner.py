"""WordAligner: Needleman-Wunsch global alignment of segment sequences.

cost[i, j] = min(
    cost[i-1, j-1] + distance(seq1[i], seq2[j]),   # substitution
    cost[i-1, j]   + gap_penalty,                  # deletion
    cost[i, j-1]   + gap_penalty,                  # insertion
)

Row 0 and column 0 accumulate the gap penalty. The traceback prefers
substitution, then deletion, then insertion whenever predecessors tie.
"""

from __future__ import annotations

import math
from typing import Protocol, Sequence

import numpy as np

from janet.align.result import AlignedPair, Alignment
from janet.inventory.models import GAP_SYMBOL


DEFAULT_GAP_PENALTY = 1.0

_TOLERANCE = 1e-9


class SegmentDistance(Protocol):
    """Anything that can price a segment substitution."""

    def distance(self, seg1: str, seg2: str) -> float: ...


class WordAligner:
    """Global aligner over a segment distance lookup.

    The aligner only needs ``lookup.distance(a, b)``; it does not care
    how distances were derived. It keeps no per-call state, so one
    instance can be shared across threads.

    Args:
        lookup: Segment distance source, typically a DistanceLookup.
        gap_penalty: Cost of each insertion or deletion.

    Raises:
        ValueError: If ``gap_penalty`` is negative or not finite.
    """

    def __init__(
        self, lookup: SegmentDistance, gap_penalty: float = DEFAULT_GAP_PENALTY
    ) -> None:
        if not math.isfinite(gap_penalty) or gap_penalty < 0:
            raise ValueError(
                f"gap_penalty must be finite and >= 0, got {gap_penalty}"
            )
        self._lookup = lookup
        self._gap = float(gap_penalty)

    @property
    def gap_penalty(self) -> float:
        return self._gap

    def cost_table(
        self, seq1: Sequence[str], seq2: Sequence[str]
    ) -> np.ndarray:
        """Fill the (n+1) x (m+1) dynamic-programming table."""
        n, m = len(seq1), len(seq2)
        gap = self._gap
        table = np.zeros((n + 1, m + 1), dtype=float)
        for i in range(1, n + 1):
            table[i, 0] = table[i - 1, 0] + gap
        for j in range(1, m + 1):
            table[0, j] = table[0, j - 1] + gap

        for i in range(1, n + 1):
            seg1 = seq1[i - 1]
            for j in range(1, m + 1):
                match = table[i - 1, j - 1] + self._lookup.distance(seg1, seq2[j - 1])
                delete = table[i - 1, j] + gap
                insert = table[i, j - 1] + gap
                table[i, j] = min(match, delete, insert)
        return table

    def align(self, word1: Sequence[str], word2: Sequence[str]) -> Alignment:
        """Align two words and return the full alignment.

        Args:
            word1: First word; a string is split into characters.
            word2: Second word.

        Returns:
            The Alignment, whose ``distance`` is the sum of step costs.
        """
        seq1 = list(word1)
        seq2 = list(word2)
        table = self.cost_table(seq1, seq2)
        gap = self._gap

        pairs: list[AlignedPair] = []
        i, j = len(seq1), len(seq2)
        while i > 0 or j > 0:
            if i > 0 and j > 0:
                seg1, seg2 = seq1[i - 1], seq2[j - 1]
                sub = self._lookup.distance(seg1, seg2)
                here = table[i, j]
                if abs(here - (table[i - 1, j - 1] + sub)) < _TOLERANCE:
                    pairs.append(AlignedPair(seg1, seg2, sub))
                    i -= 1
                    j -= 1
                elif abs(here - (table[i - 1, j] + gap)) < _TOLERANCE:
                    pairs.append(AlignedPair(seg1, GAP_SYMBOL, gap))
                    i -= 1
                else:
                    pairs.append(AlignedPair(GAP_SYMBOL, seg2, gap))
                    j -= 1
            elif i > 0:
                pairs.append(AlignedPair(seq1[i - 1], GAP_SYMBOL, gap))
                i -= 1
            else:
                pairs.append(AlignedPair(GAP_SYMBOL, seq2[j - 1], gap))
                j -= 1

        pairs.reverse()
        return Alignment(
            word1=_as_text(word1),
            word2=_as_text(word2),
            pairs=tuple(pairs),
            distance=float(sum(p.cost for p in pairs)),
        )

    def distance(self, word1: Sequence[str], word2: Sequence[str]) -> float:
        """Phonological distance between two words (total alignment cost)."""
        return self.align(word1, word2).distance


def _as_text(word: Sequence[str]) -> str:
    return word if isinstance(word, str) else "".join(word)
