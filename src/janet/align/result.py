"""Alignment: immutable output of one word-pair alignment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from janet.inventory.models import GAP_SYMBOL


class Operation(Enum):
    """Kind of alignment step."""

    SUBSTITUTION = "substitution"
    DELETION = "deletion"
    INSERTION = "insertion"


@dataclass(frozen=True)
class AlignedPair:
    """One column of an alignment.

    Attributes:
        segment1: Segment from the first word, or the gap symbol.
        segment2: Segment from the second word, or the gap symbol.
        cost: Cost of this step.
    """

    segment1: str
    segment2: str
    cost: float

    @property
    def operation(self) -> Operation:
        if self.segment2 == GAP_SYMBOL:
            return Operation.DELETION
        if self.segment1 == GAP_SYMBOL:
            return Operation.INSERTION
        return Operation.SUBSTITUTION


@dataclass(frozen=True)
class Alignment:
    """Result of aligning two words.

    Attributes:
        word1: First word as given.
        word2: Second word as given.
        pairs: Aligned columns, left to right.
        distance: Total cost (the phonological distance).
    """

    word1: str
    word2: str
    pairs: tuple[AlignedPair, ...]
    distance: float

    @property
    def length(self) -> int:
        """Number of alignment columns."""
        return len(self.pairs)

    @property
    def segments1(self) -> list[str]:
        return [p.segment1 for p in self.pairs]

    @property
    def segments2(self) -> list[str]:
        return [p.segment2 for p in self.pairs]

    @property
    def costs(self) -> list[float]:
        return [p.cost for p in self.pairs]

    def render(self, gap_marker: str = "-") -> str:
        """Two-line text view with gaps shown as ``gap_marker``."""
        top = " ".join(gap_marker if s == GAP_SYMBOL else s for s in self.segments1)
        bottom = " ".join(gap_marker if s == GAP_SYMBOL else s for s in self.segments2)
        return f"{top}\n{bottom}"

    def to_dict(self) -> dict:
        return {
            "word1": self.word1,
            "word2": self.word2,
            "segment1": self.segments1,
            "segment2": self.segments2,
            "dist": self.costs,
            "phon_dist": self.distance,
            "length": self.length,
        }
