"""Exceptions raised while reading and validating pipeline inputs."""

from __future__ import annotations

from pathlib import Path


class MalformedInputError(ValueError):
    """An input file or value violates the expected format.

    Fatal by design: the pipeline stops before writing anything.

    Attributes:
        reason: Human-readable description of the problem.
        value: The offending value (segment, header cell, word, ...).
        source: File the value came from, or None for in-memory input.
        line: 1-based line number in ``source``, or None.
    """

    def __init__(
        self,
        reason: str,
        value: object = None,
        source: str | Path | None = None,
        line: int | None = None,
    ) -> None:
        self.reason = reason
        self.value = value
        self.source = str(source) if source is not None else None
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        location = ""
        if self.source is not None and self.line is not None:
            location = f" ({self.source}, line {self.line})"
        elif self.source is not None:
            location = f" ({self.source})"
        elif self.line is not None:
            location = f" (line {self.line})"
        if self.value is None:
            return f"{self.reason}{location}"
        return f"{self.reason}: {self.value!r}{location}"
