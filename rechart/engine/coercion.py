"""Per-cell type coercion for tabular input.

Coercion is decided cell by cell, never per column: a column may end up
holding a mix of numbers and strings.
"""

import math
import re

from rechart.dsl.schema import CellValue

# Finite decimal literal: optional sign, digits with optional fraction (or a
# bare leading-dot fraction), optional exponent. Rejects inf/nan/hex/underscores.
NUMERIC_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def is_numeric(text: str) -> bool:
    """Check whether text is a non-empty finite decimal literal."""
    if not text or NUMERIC_PATTERN.match(text) is None:
        return False
    # Exponents like 1e999 overflow to inf
    return math.isfinite(float(text))


def coerce_cell(text: str) -> CellValue:
    """Coerce one cell to int, float, or leave it as a string.

    Args:
        text: Cell text, already trimmed and unquoted.

    Returns:
        An int for integer literals, a float for other decimal literals,
        otherwise the original string (including the empty string).
    """
    if not is_numeric(text):
        return text
    if INTEGER_PATTERN.match(text):
        return int(text)
    return float(text)


def coerce_row(cells: list[str]) -> list[CellValue]:
    """Coerce every cell of a row independently."""
    return [coerce_cell(cell) for cell in cells]
