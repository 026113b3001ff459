"""Naive CSV parsing into typed records.

The input is split on newlines and every line on bare commas. Quoted fields
are NOT honoured: a comma inside double quotes still splits the field, and
only the quote characters wrapping each resulting piece are removed. Callers
relying on embedded commas must pre-process their data.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from rechart.engine.coercion import coerce_row

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when CSV text has no header plus at least one data row."""


@dataclass(frozen=True)
class TabularRecord:
    """Parsed CSV: header names plus one mapping per surviving data row."""

    headers: list[str]
    rows: list[dict[str, Any]] = field(default_factory=list)

    def column(self, name: str) -> list[Any]:
        """Values of one column across all rows."""
        return [row[name] for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)


def split_fields(line: str) -> list[str]:
    """Split a line on commas, trimming and unquoting each piece."""
    return [piece.strip().strip('"') for piece in line.split(",")]


def parse_csv(text: str) -> TabularRecord:
    """Parse comma-delimited text whose first line is the header.

    Rows whose field count differs from the header, and rows whose every
    field is empty, are dropped.

    Args:
        text: Raw CSV text.

    Returns:
        TabularRecord with coerced cell values.

    Raises:
        EmptyInputError: Fewer than two non-blank lines.
    """
    lines = [line for line in (text or "").splitlines() if line.strip()]
    if len(lines) < 2:
        raise EmptyInputError("CSV input needs a header and at least one data row")

    headers = split_fields(lines[0])
    rows = []

    for line_number, line in enumerate(lines[1:], start=2):
        cells = split_fields(line)
        if len(cells) != len(headers):
            logger.debug(
                f"Dropping CSV line {line_number}: {len(cells)} fields, "
                f"header has {len(headers)}"
            )
            continue

        values = coerce_row(cells)
        if all(value == "" for value in values):
            continue

        rows.append(dict(zip(headers, values)))

    return TabularRecord(headers=headers, rows=rows)
