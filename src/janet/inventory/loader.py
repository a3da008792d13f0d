"""Read a tab-separated feature matrix into a SegmentInventory.

Expected layout (UTF-8, header required)::

    segment  cons  son  voice ...
    p        1     0    0
    a        0     1    1     (empty cells mean "not applicable")

Every problem is reported as a MalformedInputError carrying the file
path, the 1-based line number and the offending value.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from janet.errors import MalformedInputError
from janet.inventory.models import FeatureValue, SegmentInventory


logger = logging.getLogger(__name__)

SEGMENT_COLUMN = "segment"


def read_feature_matrix(path: str | Path) -> SegmentInventory:
    """Load and validate a feature matrix file.

    Args:
        path: Path to the TSV file.

    Returns:
        The validated, immutable inventory.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        MalformedInputError: On a bad header, duplicate or multi-character
            segment labels, duplicate feature names, ragged rows, or cell
            values outside {0, 1, empty}.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Feature matrix not found: {path}")

    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE)
        lines = list(enumerate(reader, start=1))

    if not lines:
        raise MalformedInputError("Feature matrix is empty", source=path)

    header_line, header = lines[0]
    return parse_feature_rows(header, lines[1:], source=path, header_line=header_line)


def parse_feature_rows(
    header: list[str],
    rows: list[tuple[int, list[str]]],
    source: str | Path | None = None,
    header_line: int = 1,
) -> SegmentInventory:
    """Validate an already-split header and numbered rows.

    Args:
        header: Header cells.
        rows: ``(line_number, cells)`` pairs for the body.
        source: File name used in error messages.
        header_line: Line number of the header.

    Returns:
        A SegmentInventory.
    """
    header = [cell.strip() for cell in header]
    if not header or header[0] != SEGMENT_COLUMN:
        found = header[0] if header else ""
        raise MalformedInputError(
            f"First column must be named {SEGMENT_COLUMN!r}",
            found, source=source, line=header_line,
        )
    features = header[1:]
    if not features:
        raise MalformedInputError(
            "Feature matrix has no feature columns", source=source, line=header_line,
        )
    seen_features: set[str] = set()
    for feat in features:
        if not feat:
            raise MalformedInputError(
                "Empty feature name in header", feat,
                source=source, line=header_line,
            )
        if feat in seen_features:
            raise MalformedInputError(
                "Duplicate feature", feat, source=source, line=header_line,
            )
        seen_features.add(feat)

    segments: list[str] = []
    values: list[tuple[FeatureValue, ...]] = []
    seen_segments: set[str] = set()
    width = len(header)

    for line_no, cells in rows:
        if not cells or all(not c.strip() for c in cells):
            continue

        # Writers often drop trailing empty cells.
        if len(cells) < width:
            cells = cells + [""] * (width - len(cells))
        elif len(cells) > width:
            extra = cells[width:]
            if any(c.strip() for c in extra):
                raise MalformedInputError(
                    f"Row has {len(cells)} columns, header has {width}",
                    cells[0], source=source, line=line_no,
                )
            cells = cells[:width]

        seg = cells[0].strip()
        if len(seg) != 1:
            raise MalformedInputError(
                "Segment is not a single character", seg,
                source=source, line=line_no,
            )
        if seg in seen_segments:
            raise MalformedInputError(
                "Duplicate segment", seg, source=source, line=line_no,
            )
        seen_segments.add(seg)

        row: list[FeatureValue] = []
        for feat, cell in zip(features, cells[1:]):
            try:
                row.append(FeatureValue.parse(cell))
            except ValueError:
                raise MalformedInputError(
                    f"Invalid value for feature {feat!r} of segment {seg!r}",
                    cell, source=source, line=line_no,
                ) from None
        segments.append(seg)
        values.append(tuple(row))

    if not segments:
        raise MalformedInputError("Feature matrix has no segments", source=source)

    try:
        inventory = SegmentInventory(
            segments=tuple(segments),
            features=tuple(features),
            values=tuple(values),
        )
    except MalformedInputError as exc:
        raise MalformedInputError(exc.reason, exc.value, source=source) from None

    logger.info(
        "Loaded feature matrix with %d segments and %d features from %s",
        inventory.size, inventory.feature_count, source,
    )
    return inventory
