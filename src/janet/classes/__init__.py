"""Natural classes: feature specifications and the segments they pick out."""

from janet.classes.generator import (
    count_feature_specs,
    enumerate_feature_specs,
    find_extension,
    generate_natural_classes,
    remove_redundant_classes,
)
from janet.classes.models import FeatureSpec, NaturalClass

__all__ = [
    "FeatureSpec",
    "NaturalClass",
    "count_feature_specs",
    "enumerate_feature_specs",
    "find_extension",
    "generate_natural_classes",
    "remove_redundant_classes",
]
