"""Read and validate word lists.

A word list is a single-column UTF-8 file headed ``lemma``. Files
without the header are accepted (every line is then a word) with a
warning. Each character of a word is one segment and must exist in the
feature matrix.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from janet.errors import MalformedInputError
from janet.inventory.models import SegmentInventory


logger = logging.getLogger(__name__)

LEMMA_COLUMN = "lemma"


def unique_words(words: Iterable[str]) -> list[str]:
    """Drop duplicates, keeping the first occurrence of each word."""
    return list(dict.fromkeys(words))


def read_word_list(
    path: str | Path, inventory: SegmentInventory | None = None
) -> list[str]:
    """Load a word list, optionally validating it against an inventory.

    Args:
        path: Path to the word list.
        inventory: If given, every character of every word must be a
            segment of this inventory.

    Returns:
        Unique words in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        MalformedInputError: If the file is empty, a line has more than
            one column, or a word uses an unknown segment.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Word list not found: {path}")

    lines = path.read_text(encoding="utf-8-sig").splitlines()
    if not lines:
        raise MalformedInputError("Word list is empty", source=path)

    has_header = lines[0].strip() == LEMMA_COLUMN
    if not has_header:
        logger.warning(
            "No %r header found in %s; treating every line as a word",
            LEMMA_COLUMN, path,
        )

    start = 2 if has_header else 1
    numbered: list[tuple[int, str]] = []
    for line_no, line in enumerate(lines[start - 1:], start=start):
        word = line.strip()
        if not word:
            continue
        if "\t" in word:
            raise MalformedInputError(
                "Word list must have a single column", word,
                source=path, line=line_no,
            )
        numbered.append((line_no, word))

    if not numbered:
        raise MalformedInputError("Word list has no words", source=path)

    if inventory is not None:
        validate_words(
            [w for _, w in numbered], inventory,
            source=path, lines=[n for n, _ in numbered],
        )

    words = unique_words(w for _, w in numbered)
    logger.info("Loaded %d unique words from %s", len(words), path)
    return words


def validate_words(
    words: Iterable[Sequence[str]],
    inventory: SegmentInventory,
    source: str | Path | None = None,
    lines: Sequence[int] | None = None,
) -> None:
    """Check that every segment of every word is in the inventory.

    Args:
        words: Words as strings or as sequences of single-character
            segments.
        inventory: The segment inventory.
        source: File name used in error messages.
        lines: Line number of each word in ``source``. Defaults to the
            1-based position of the word.

    Raises:
        MalformedInputError: On the first unknown segment, naming the
            segment, the word and its line.
    """
    for position, word in enumerate(words):
        line_no = lines[position] if lines is not None else position + 1
        for char in word:
            if char not in inventory:
                text = word if isinstance(word, str) else "".join(word)
                raise MalformedInputError(
                    f"Unknown segment in word {text!r}; not in feature matrix",
                    char, source=source, line=line_no,
                )
