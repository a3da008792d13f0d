"""End-to-end run: feature matrix + word list -> word distance table.

All inputs are validated and every result is computed before the first
byte is written, so a failure never leaves a partial table behind.
Both files are written to temporary siblings and renamed into place
only once both writes have succeeded.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from janet.align.aligner import DEFAULT_GAP_PENALTY, WordAligner
from janet.classes.generator import generate_natural_classes
from janet.distance.builder import PairwiseDistanceBuilder, WordDistanceTable
from janet.distance.table import write_distance_table
from janet.inventory.loader import read_feature_matrix
from janet.lexicon.loader import read_word_list
from janet.similarity.lookup import DEFAULT_DISTANCE, DistanceLookup
from janet.similarity.metric import SimilarityMatrix
from janet.similarity.table import write_similarity_table


logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("out")
DEFAULT_OUTPUT_NAME = "word_distances.tsv.gz"
SIMILARITY_TABLE_NAME = "segment_similarity.tsv"


@dataclass(frozen=True)
class PipelineResult:
    """Summary of a completed run.

    Attributes:
        distance_path: Where the word distance table was written.
        similarity_path: Where the segment similarity table was written.
        segment_count: Segments in the feature matrix.
        feature_count: Features in the feature matrix.
        class_count: Natural classes retained.
        word_count: Unique words.
        table: The computed distance table.
    """

    distance_path: Path
    similarity_path: Path
    segment_count: int
    feature_count: int
    class_count: int
    word_count: int
    table: WordDistanceTable

    @property
    def pair_count(self) -> int:
        return self.table.num_pairs


def resolve_output_path(
    output: str | Path | None, default_dir: str | Path = DEFAULT_OUTPUT_DIR
) -> Path:
    """Decide where the distance table goes.

    None means ``default_dir/word_distances.tsv.gz``. An existing
    directory, or a path written with a trailing separator, receives
    ``word_distances.tsv.gz``. Anything else is taken as the file path.
    """
    if output is None:
        return Path(default_dir) / DEFAULT_OUTPUT_NAME
    raw = str(output)
    path = Path(output)
    if path.is_dir() or raw.endswith(("/", "\\", os.sep)):
        return path / DEFAULT_OUTPUT_NAME
    return path


def _temp_sibling(path: Path) -> Path:
    return path.with_name(f".{path.name}.tmp{path.suffix}")


def _write_all(writes: list[tuple[Path, Callable[[Path], int]]]) -> None:
    """Write every file to a temporary sibling, then rename them all.

    Nothing is renamed until every writer has succeeded. Leftover
    temporaries are removed whether or not the writes succeed.
    """
    temps = [_temp_sibling(path) for path, _ in writes]
    try:
        for (_, writer), tmp in zip(writes, temps):
            writer(tmp)
        for (path, _), tmp in zip(writes, temps):
            os.replace(tmp, path)
    finally:
        for tmp in temps:
            if tmp.exists():
                tmp.unlink()


def run_pipeline(
    feature_path: str | Path,
    word_path: str | Path,
    output: str | Path | None = None,
    gap_penalty: float = DEFAULT_GAP_PENALTY,
    precision: int | None = 3,
    default_distance: float = DEFAULT_DISTANCE,
    similarity_path: str | Path | None = None,
) -> PipelineResult:
    """Compute and write segment similarities and word distances.

    Args:
        feature_path: Feature matrix TSV.
        word_path: Word list (``lemma`` column).
        output: Distance table destination (file or directory). Defaults
            to ``out/word_distances.tsv.gz``.
        gap_penalty: Cost of an insertion or deletion.
        precision: Decimal places kept in the similarity table. Word
            distances are computed from the rounded values, so the
            written similarity table fully determines them.
        default_distance: Distance for segment pairs missing from the table.
        similarity_path: Similarity table destination. Defaults to
            ``segment_similarity.tsv`` next to the distance table.

    Returns:
        A PipelineResult.

    Raises:
        FileNotFoundError: If an input file is missing.
        MalformedInputError: If an input file fails validation.
        ValueError: On invalid numeric options.
        OSError: If an output cannot be written. Existing tables are
            only replaced once both new tables have been written.
    """
    # Validation first; nothing is written if either input is bad.
    inventory = read_feature_matrix(feature_path)
    words = read_word_list(word_path, inventory=inventory)
    if not math.isfinite(gap_penalty) or gap_penalty < 0:
        raise ValueError(f"gap_penalty must be finite and >= 0, got {gap_penalty}")
    if precision is not None and precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    distance_path = resolve_output_path(output)
    sim_path = (
        Path(similarity_path) if similarity_path is not None
        else distance_path.parent / SIMILARITY_TABLE_NAME
    )

    classes = generate_natural_classes(inventory)
    matrix = SimilarityMatrix.from_inventory(inventory, classes)
    sim_rows = list(matrix.rows(precision=precision, include_gap=True))
    lookup = DistanceLookup.from_similarity_rows(sim_rows, default=default_distance)

    aligner = WordAligner(lookup, gap_penalty=gap_penalty)
    table = PairwiseDistanceBuilder(aligner).build(words)

    distance_path.parent.mkdir(parents=True, exist_ok=True)
    sim_path.parent.mkdir(parents=True, exist_ok=True)
    _write_all([
        (sim_path, lambda p: write_similarity_table(sim_rows, p)),
        (distance_path, lambda p: write_distance_table(table, p)),
    ])
    logger.info("Word distances written to %s", distance_path)

    return PipelineResult(
        distance_path=distance_path,
        similarity_path=sim_path,
        segment_count=inventory.size,
        feature_count=inventory.feature_count,
        class_count=len(classes),
        word_count=len(words),
        table=table,
    )
