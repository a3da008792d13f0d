"""Read and write segment similarity tables.

Format (tab-separated, UTF-8)::

    segment1  segment2  similarity
    p         b         0.429
"""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Iterable

from janet.errors import MalformedInputError


logger = logging.getLogger(__name__)

SIMILARITY_COLUMNS = ("segment1", "segment2", "similarity")


def write_similarity_table(
    rows: Iterable[tuple[str, str, float]], path: str | Path
) -> int:
    """Write similarity rows to ``path``.

    Labels never contain a tab or newline, so cells are written unquoted.

    Returns:
        Number of data rows written.
    """
    path = Path(path)
    count = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write("\t".join(SIMILARITY_COLUMNS) + "\n")
        for seg1, seg2, sim in rows:
            f.write(f"{seg1}\t{seg2}\t{float(sim)!r}\n")
            count += 1
    logger.info("Wrote %d similarity rows to %s", count, path)
    return count


def read_similarity_table(path: str | Path) -> list[tuple[str, str, float]]:
    """Read a similarity table written by ``write_similarity_table``.

    Segment cells are not stripped: the gap symbol is a single space.

    Raises:
        MalformedInputError: On a wrong header, a short row, or a
            similarity that is not a number in [0, 1].
    """
    path = Path(path)
    rows: list[tuple[str, str, float]] = []
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE)
        header = next(reader, None)
        if header is None or tuple(h.strip() for h in header) != SIMILARITY_COLUMNS:
            raise MalformedInputError(
                f"Similarity table header must be {'/'.join(SIMILARITY_COLUMNS)}",
                header, source=path, line=1,
            )
        for line_no, cells in enumerate(reader, start=2):
            if not cells:
                continue
            if len(cells) != 3:
                raise MalformedInputError(
                    "Similarity row must have 3 columns", cells,
                    source=path, line=line_no,
                )
            seg1, seg2, raw = cells
            try:
                sim = float(raw)
            except ValueError:
                raise MalformedInputError(
                    "Similarity is not a number", raw, source=path, line=line_no,
                ) from None
            if math.isnan(sim) or not 0.0 <= sim <= 1.0:
                raise MalformedInputError(
                    "Similarity outside [0, 1]", raw, source=path, line=line_no,
                )
            rows.append((seg1, seg2, sim))
    return rows
