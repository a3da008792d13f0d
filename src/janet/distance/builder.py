"""PairwiseDistanceBuilder: word × word phonological distances.

Every unordered pair is aligned exactly once; the reversed pair is
filled in by mirroring. That is only correct because the aligner's
segment lookup is symmetric, which DistanceLookup guarantees at
construction time.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np

from janet.align.aligner import WordAligner
from janet.lexicon.loader import unique_words


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordDistanceTable:
    """Symmetric word-pair distances.

    Attributes:
        words: Unique words in input order.
        pair_distances: Distance for each unordered pair ``(words[i],
            words[j])`` with i < j, in computation order.
        elapsed_seconds: Wall-clock time spent aligning.
    """

    words: tuple[str, ...]
    pair_distances: tuple[tuple[str, str, float], ...]
    elapsed_seconds: float = 0.0
    _index: dict[tuple[str, str], float] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        index: dict[tuple[str, str], float] = {}
        for w1, w2, dist in self.pair_distances:
            index[(w1, w2)] = dist
            index[(w2, w1)] = dist
        for w in self.words:
            index[(w, w)] = 0.0
        object.__setattr__(self, "_index", index)

    @property
    def num_pairs(self) -> int:
        """Number of unordered pairs aligned."""
        return len(self.pair_distances)

    def distance(self, word1: str, word2: str) -> float:
        """Distance between two words of the table.

        Raises:
            KeyError: If either word is not in the table.
        """
        try:
            return self._index[(word1, word2)]
        except KeyError:
            raise KeyError(f"Word pair not in table: {word1!r}/{word2!r}") from None

    def rows(self) -> Iterator[tuple[str, str, float]]:
        """Yield ``(word1, word2, phon_dist)`` rows.

        Order: computed pairs, then their mirror images, then one
        zero-distance row per word.
        """
        yield from self.pair_distances
        for w1, w2, dist in self.pair_distances:
            yield w2, w1, dist
        for w in self.words:
            yield w, w, 0.0

    def __len__(self) -> int:
        """Number of rows ``rows()`` yields."""
        return 2 * len(self.pair_distances) + len(self.words)

    def to_matrix(self) -> np.ndarray:
        """Square distance matrix in ``words`` order."""
        n = len(self.words)
        pos = {w: i for i, w in enumerate(self.words)}
        matrix = np.zeros((n, n), dtype=float)
        for w1, w2, dist in self.pair_distances:
            matrix[pos[w1], pos[w2]] = dist
            matrix[pos[w2], pos[w1]] = dist
        return matrix


class PairwiseDistanceBuilder:
    """Align all unique word pairs and collect a WordDistanceTable.

    Args:
        aligner: The word aligner to use for every pair.
    """

    def __init__(self, aligner: WordAligner) -> None:
        self._aligner = aligner

    @property
    def aligner(self) -> WordAligner:
        return self._aligner

    def build(self, words: Iterable[str]) -> WordDistanceTable:
        """Compute distances for every unordered pair of unique words.

        Args:
            words: Words, duplicates allowed (only the first is kept).

        Returns:
            The symmetric WordDistanceTable.
        """
        unique = unique_words(words)
        n = len(unique)
        logger.info("Aligning %d word pairs for %d words", n * (n - 1) // 2, n)

        start = time.perf_counter()
        pairs: list[tuple[str, str, float]] = []
        for i in range(n):
            for j in range(i + 1, n):
                dist = self._aligner.distance(unique[i], unique[j])
                pairs.append((unique[i], unique[j], dist))
        elapsed = time.perf_counter() - start

        logger.info("Aligned %d pairs in %.2fs", len(pairs), elapsed)
        return WordDistanceTable(
            words=tuple(unique),
            pair_distances=tuple(pairs),
            elapsed_seconds=elapsed,
        )
