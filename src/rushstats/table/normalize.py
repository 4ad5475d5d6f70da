"""Cell cleanup used before numeric comparison."""

from __future__ import annotations

import math
import re
from typing import Any

QUALIFIER_MARKER = "T"
THOUSANDS_SEPARATOR = ","

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def normalize_cell(value: Any) -> Any:
    """Strip the qualifier marker and thousands separator from text cells.

    Only the first occurrence of each is removed, so ``"1,234,567"`` becomes
    ``"1234,567"``. Existing exports and sorted views depend on this, so a
    value with several separators stays incomparable.
    """

    if not isinstance(value, str):
        return value
    return value.replace(QUALIFIER_MARKER, "", 1).replace(THOUSANDS_SEPARATOR, "", 1)


def to_number(value: Any) -> float:
    """Coerce a cell to ``float``; anything unparsable becomes NaN."""

    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    cleaned = normalize_cell(value)
    if not isinstance(cleaned, str) or not cleaned.strip():
        return math.nan
    cleaned = cleaned.strip()
    if not _NUMBER_RE.fullmatch(cleaned):
        return math.nan
    return float(cleaned)
