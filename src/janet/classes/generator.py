"""Natural class generation over a segment inventory.

Every non-empty feature specification is enumerated (each feature is
omitted, pinned to 0 or pinned to 1, giving 3^F - 1 specs), each spec's
extension is computed, empty extensions are dropped and redundant
classes are removed.

The enumeration is exponential in the number of features. Tens of
features are fine in practice; ``max_features`` guards against inputs
that would never finish.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Iterator

from janet.classes.models import FeatureSpec, NaturalClass
from janet.inventory.models import SegmentInventory


logger = logging.getLogger(__name__)

DEFAULT_MAX_FEATURES = 20


def count_feature_specs(n_features: int) -> int:
    """Number of non-empty specs over ``n_features`` features (3^F - 1)."""
    return 3 ** n_features - 1


def enumerate_feature_specs(features: Iterable[str]) -> Iterator[FeatureSpec]:
    """Yield every non-empty FeatureSpec over ``features``.

    Each spec index is read as a base-3 number, one digit per feature:
    0 = omit, 1 = pin to 0, 2 = pin to 1. Index 0 (all omitted) is skipped.

    Args:
        features: Feature names.

    Yields:
        Exactly ``3 ** len(features) - 1`` specs, in index order.
    """
    names = list(features)
    for index in range(1, 3 ** len(names)):
        constraints = []
        num = index
        for name in names:
            num, choice = divmod(num, 3)
            if choice == 1:
                constraints.append((name, False))
            elif choice == 2:
                constraints.append((name, True))
        yield FeatureSpec(tuple(constraints))


def find_extension(spec: FeatureSpec, inventory: SegmentInventory) -> frozenset[str]:
    """Segments matching ``spec``; "not applicable" never matches."""
    return inventory.extension(spec)


def remove_redundant_classes(classes: Iterable[NaturalClass]) -> list[NaturalClass]:
    """Drop classes made redundant by a more specific class.

    A class is redundant when another class has exactly the same members
    and strictly more constraints. Classes are only ever compared with
    others of the same extension, so grouping by extension gives the same
    result as the all-pairs scan. Input order is preserved. Running this
    on its own output returns the same list.

    Args:
        classes: Candidate natural classes.

    Returns:
        The surviving classes.
    """
    classes = list(classes)
    widest: dict[frozenset[str], int] = defaultdict(int)
    for nc in classes:
        widest[nc.members] = max(widest[nc.members], nc.spec.size)
    return [nc for nc in classes if nc.spec.size == widest[nc.members]]


def generate_natural_classes(
    inventory: SegmentInventory,
    max_features: int | None = DEFAULT_MAX_FEATURES,
) -> list[NaturalClass]:
    """Generate the non-redundant natural classes of an inventory.

    Args:
        inventory: The validated segment inventory.
        max_features: Refuse inventories with more features than this.
            None disables the check.

    Returns:
        Natural classes with non-empty extensions, redundancy removed,
        in enumeration order.

    Raises:
        ValueError: If the inventory exceeds ``max_features``.
    """
    n_features = inventory.feature_count
    if max_features is not None and n_features > max_features:
        raise ValueError(
            f"Inventory has {n_features} features; enumerating "
            f"{count_feature_specs(n_features)} specs exceeds the limit of "
            f"{max_features} features"
        )

    raw = 0
    classes: list[NaturalClass] = []
    for spec in enumerate_feature_specs(inventory.features):
        raw += 1
        members = find_extension(spec, inventory)
        if members:
            classes.append(NaturalClass(spec=spec, members=members))

    retained = remove_redundant_classes(classes)
    logger.info(
        "Natural classes: %d specs, %d non-empty, %d after redundancy removal",
        raw, len(classes), len(retained),
    )
    return retained
