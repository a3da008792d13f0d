"""FeatureSpec and NaturalClass: immutable values produced by the generator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureSpec:
    """A non-empty set of feature constraints, e.g. ``[labial=1, voice=0]``.

    Constraints are stored sorted by feature name, so two specs pinning
    the same features to the same values compare and hash equal.

    Attributes:
        constraints: ``(feature, pinned_value)`` pairs.
    """

    constraints: tuple[tuple[str, bool], ...]

    def __post_init__(self) -> None:
        constraints = tuple(sorted((f, bool(v)) for f, v in self.constraints))
        if not constraints:
            raise ValueError("FeatureSpec must pin at least one feature")
        names = [f for f, _ in constraints]
        if len(set(names)) != len(names):
            raise ValueError(f"FeatureSpec pins a feature twice: {names}")
        object.__setattr__(self, "constraints", constraints)

    @classmethod
    def from_dict(cls, constraints: dict[str, int | bool]) -> FeatureSpec:
        """Build from ``{feature: 0 | 1}``."""
        return cls(tuple((f, bool(v)) for f, v in constraints.items()))

    def as_dict(self) -> dict[str, int]:
        """Constraints as ``{feature: 0 | 1}``."""
        return {f: int(v) for f, v in self.constraints}

    @property
    def size(self) -> int:
        """Number of pinned features."""
        return len(self.constraints)

    @property
    def features(self) -> tuple[str, ...]:
        return tuple(f for f, _ in self.constraints)

    def __str__(self) -> str:
        return "[" + ", ".join(f"{f}={int(v)}" for f, v in self.constraints) + "]"


@dataclass(frozen=True)
class NaturalClass:
    """A feature specification together with the segments it picks out.

    Attributes:
        spec: The defining constraints.
        members: The extension: segments satisfying every constraint.
    """

    spec: FeatureSpec
    members: frozenset[str]

    @property
    def size(self) -> int:
        """Number of member segments."""
        return len(self.members)

    def contains(self, segment: str) -> bool:
        return segment in self.members

    def to_dict(self) -> dict:
        return {
            "spec": self.spec.as_dict(),
            "members": sorted(self.members),
        }

    def __str__(self) -> str:
        return f"{self.spec} → {{{', '.join(sorted(self.members))}}}"
