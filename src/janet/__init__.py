"""janet: phonological distances between words from segment features.

Natural classes are generated from a feature matrix, segment similarity
is the share of natural classes two segments have in common, and word
distances come from a global alignment that prices substitutions at
1 - similarity.
"""

__version__ = "0.1.0"

from janet.align import Alignment, WordAligner
from janet.classes import NaturalClass, generate_natural_classes
from janet.distance import PairwiseDistanceBuilder, WordDistanceTable
from janet.errors import MalformedInputError
from janet.inventory import GAP_SYMBOL, SegmentInventory, read_feature_matrix
from janet.lexicon import validate_words
from janet.pipeline import run_pipeline
from janet.similarity import DistanceLookup, SimilarityMatrix


def word_distances(
    inventory: SegmentInventory,
    words: list[str],
    gap_penalty: float = 1.0,
    precision: int | None = 3,
) -> WordDistanceTable:
    """Compute a word distance table in memory.

    Validates ``words`` against ``inventory``, derives natural classes
    and similarities, and aligns every unique word pair.

    Args:
        inventory: The segment inventory.
        words: Words to compare; duplicates are dropped.
        gap_penalty: Cost of an insertion or deletion.
        precision: Decimal places similarities are rounded to before
            conversion to distances. None keeps full precision.

    Returns:
        The symmetric WordDistanceTable.

    Raises:
        MalformedInputError: If a word uses a segment not in the inventory.
    """
    validate_words(words, inventory)
    matrix = SimilarityMatrix.from_inventory(inventory)
    lookup = DistanceLookup.from_matrix(matrix, precision=precision)
    builder = PairwiseDistanceBuilder(WordAligner(lookup, gap_penalty=gap_penalty))
    return builder.build(words)


__all__ = [
    "Alignment",
    "DistanceLookup",
    "GAP_SYMBOL",
    "MalformedInputError",
    "NaturalClass",
    "PairwiseDistanceBuilder",
    "SegmentInventory",
    "SimilarityMatrix",
    "WordAligner",
    "WordDistanceTable",
    "__version__",
    "generate_natural_classes",
    "read_feature_matrix",
    "run_pipeline",
    "word_distances",
]
