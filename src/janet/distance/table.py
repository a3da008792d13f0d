"""Read and write word distance tables.

Format (tab-separated, UTF-8, gzip-compressed when the file name ends
in ``.gz``)::

    word1  word2  phon_dist
"""

from __future__ import annotations

import csv
import gzip
import logging
import math
from pathlib import Path
from typing import IO

from janet.distance.builder import WordDistanceTable
from janet.errors import MalformedInputError


logger = logging.getLogger(__name__)

DISTANCE_COLUMNS = ("word1", "word2", "phon_dist")


def _open_text(path: Path, mode: str) -> IO[str]:
    if path.suffix == ".gz":
        return gzip.open(path, mode + "t", encoding="utf-8", newline="")
    return open(path, mode, encoding="utf-8", newline="")


def write_distance_table(table: WordDistanceTable, path: str | Path) -> int:
    """Write ``table`` as TSV, gzip-compressed for ``.gz`` paths.

    Words never contain a tab or newline, so cells are written unquoted.

    Returns:
        Number of data rows written.
    """
    path = Path(path)
    count = 0
    with _open_text(path, "w") as f:
        f.write("\t".join(DISTANCE_COLUMNS) + "\n")
        for w1, w2, dist in table.rows():
            f.write(f"{w1}\t{w2}\t{float(dist)!r}\n")
            count += 1
    logger.info("Wrote %d distance rows to %s", count, path)
    return count


def read_distance_table(path: str | Path) -> list[tuple[str, str, float]]:
    """Read rows from a file written by ``write_distance_table``.

    Raises:
        MalformedInputError: On a wrong header, a short row, or a
            distance that is not a non-negative number.
    """
    path = Path(path)
    rows: list[tuple[str, str, float]] = []
    with _open_text(path, "r") as f:
        reader = csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE)
        header = next(reader, None)
        if header is None or tuple(header) != DISTANCE_COLUMNS:
            raise MalformedInputError(
                f"Distance table header must be {'/'.join(DISTANCE_COLUMNS)}",
                header, source=path, line=1,
            )
        for line_no, cells in enumerate(reader, start=2):
            if not cells:
                continue
            if len(cells) != 3:
                raise MalformedInputError(
                    "Distance row must have 3 columns", cells,
                    source=path, line=line_no,
                )
            try:
                dist = float(cells[2])
            except ValueError:
                raise MalformedInputError(
                    "Distance is not a number", cells[2], source=path, line=line_no,
                ) from None
            if not math.isfinite(dist) or dist < 0:
                raise MalformedInputError(
                    "Distance must be finite and >= 0", cells[2],
                    source=path, line=line_no,
                )
            rows.append((cells[0], cells[1], dist))
    return rows
