"""Data models for segment inventories.

Pure data containers with no I/O. A ``SegmentInventory`` is the
segments × features table every later stage reads from; it is
immutable once built so it can be shared freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from janet.errors import MalformedInputError

if TYPE_CHECKING:
    from janet.classes.models import FeatureSpec


GAP_SYMBOL = " "
"""Placeholder for "no segment" in similarity tables and alignments."""


class FeatureValue(Enum):
    """Ternary feature value: unspecified, 0 or 1."""

    ABSENT = ""
    MINUS = "0"
    PLUS = "1"

    @classmethod
    def parse(cls, raw: str) -> FeatureValue:
        """Parse a feature matrix cell.

        Accepts ``""`` (not applicable), ``"0"`` and ``"1"``, plus the
        ``"-"`` / ``"+"`` spellings used by PHOIBLE-style tables.

        Raises:
            ValueError: If the cell is none of the above.
        """
        cell = raw.strip()
        if cell in _ALIASES:
            return _ALIASES[cell]
        raise ValueError(
            f"Invalid feature value: {raw!r}. Must be one of '0', '1' or empty"
        )

    @property
    def is_defined(self) -> bool:
        return self is not FeatureValue.ABSENT

    def satisfies(self, pinned: bool) -> bool:
        """Whether this value meets a constraint pinning the feature to ``pinned``.

        ABSENT never satisfies anything, including a pin to 0.
        """
        if self is FeatureValue.ABSENT:
            return False
        return (self is FeatureValue.PLUS) == pinned


_ALIASES = {
    "": FeatureValue.ABSENT,
    "0": FeatureValue.MINUS,
    "1": FeatureValue.PLUS,
    "-": FeatureValue.MINUS,
    "+": FeatureValue.PLUS,
}


@dataclass(frozen=True)
class SegmentInventory:
    """Segments × features table with ternary cells.

    Attributes:
        segments: Segment labels in file order. Unique, one code point each.
        features: Feature names in column order. Unique.
        values: One row per segment, one FeatureValue per feature.

    Raises:
        MalformedInputError: On duplicate labels, multi-character segments,
            or a segment equal to the gap symbol.
        ValueError: If ``values`` does not match the label dimensions.
    """

    segments: tuple[str, ...]
    features: tuple[str, ...]
    values: tuple[tuple[FeatureValue, ...], ...]
    _segment_index: dict[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )
    _feature_index: dict[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        features = tuple(self.features)
        values = tuple(tuple(row) for row in self.values)
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "features", features)
        object.__setattr__(self, "values", values)

        if len(values) != len(segments):
            raise ValueError(
                f"Feature table has {len(values)} rows for "
                f"{len(segments)} segments"
            )
        for seg, row in zip(segments, values):
            if len(row) != len(features):
                raise ValueError(
                    f"Segment {seg!r} has {len(row)} feature values, "
                    f"expected {len(features)}"
                )

        seen: set[str] = set()
        for seg in segments:
            if len(seg) != 1:
                raise MalformedInputError(
                    "Segment is not a single character", seg
                )
            if seg == GAP_SYMBOL:
                raise MalformedInputError(
                    "Segment collides with the gap symbol", seg
                )
            if seg in seen:
                raise MalformedInputError("Duplicate segment", seg)
            seen.add(seg)

        seen.clear()
        for feat in features:
            if not feat:
                raise MalformedInputError("Empty feature name", feat)
            if feat in seen:
                raise MalformedInputError("Duplicate feature", feat)
            seen.add(feat)

        object.__setattr__(
            self, "_segment_index", {s: i for i, s in enumerate(segments)}
        )
        object.__setattr__(
            self, "_feature_index", {f: i for i, f in enumerate(features)}
        )

    @classmethod
    def from_rows(
        cls,
        features: list[str] | tuple[str, ...],
        rows: dict[str, dict[str, int | None]],
    ) -> SegmentInventory:
        """Build an inventory from ``{segment: {feature: 0 | 1 | None}}``.

        Missing features and ``None`` both mean "not applicable". Handy for
        tests and for inventories assembled in code.
        """
        segments = tuple(rows)
        values = []
        for seg in segments:
            cells = rows[seg]
            unknown = set(cells) - set(features)
            if unknown:
                raise ValueError(
                    f"Segment {seg!r} sets unknown features: {sorted(unknown)}"
                )
            row = []
            for feat in features:
                raw = cells.get(feat)
                row.append(
                    FeatureValue.ABSENT if raw is None
                    else FeatureValue.parse(str(raw))
                )
            values.append(tuple(row))
        return cls(segments=segments, features=tuple(features), values=tuple(values))

    # --- Lookups ---

    def __contains__(self, segment: object) -> bool:
        return segment in self._segment_index

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def index_of(self, segment: str) -> int:
        """Position of ``segment`` in the inventory.

        Raises:
            KeyError: If the segment is unknown.
        """
        try:
            return self._segment_index[segment]
        except KeyError:
            raise KeyError(f"Unknown segment: {segment!r}") from None

    def row(self, segment: str) -> dict[str, FeatureValue]:
        """Feature values of one segment keyed by feature name."""
        return dict(zip(self.features, self.values[self.index_of(segment)]))

    def value(self, segment: str, feature: str) -> FeatureValue:
        """Value of ``feature`` for ``segment``.

        Raises:
            KeyError: If either label is unknown.
        """
        if feature not in self._feature_index:
            raise KeyError(f"Unknown feature: {feature!r}")
        return self.values[self.index_of(segment)][self._feature_index[feature]]

    # --- Natural class support ---

    def matches(self, segment: str, spec: FeatureSpec) -> bool:
        """Whether ``segment`` satisfies every constraint in ``spec``."""
        row = self.values[self.index_of(segment)]
        for feat, pinned in spec.constraints:
            if not row[self._feature_index[feat]].satisfies(pinned):
                return False
        return True

    def extension(self, spec: FeatureSpec) -> frozenset[str]:
        """All segments that satisfy ``spec``.

        Raises:
            KeyError: If ``spec`` names a feature not in this inventory.
        """
        for feat, _ in spec.constraints:
            if feat not in self._feature_index:
                raise KeyError(f"Unknown feature: {feat!r}")
        return frozenset(s for s in self.segments if self.matches(s, spec))

    # --- Summary ---

    @property
    def size(self) -> int:
        """Number of segments."""
        return len(self.segments)

    @property
    def feature_count(self) -> int:
        """Number of features."""
        return len(self.features)

    @property
    def is_fully_specified(self) -> bool:
        """True when no cell is "not applicable"."""
        return all(v.is_defined for row in self.values for v in row)

    def __repr__(self) -> str:
        return (
            f"SegmentInventory(segments={self.size}, "
            f"features={self.feature_count})"
        )
