"""
Identity and normalization helpers shared by every code path that
compares IMDb identifiers or reads upstream year strings.
"""

import re
from typing import Optional

UNKNOWN_YEAR = 0

_LEADING_YEAR = re.compile(r"^\s*(\d{4})")


def normalize_imdb_id(imdb_id: str) -> str:
    """Return the comparison key for an IMDb identifier (trimmed, case-folded)."""
    return imdb_id.strip().casefold()


def same_imdb_id(a: str, b: str) -> bool:
    """Case-insensitive identity check for two IMDb identifiers."""
    return normalize_imdb_id(a) == normalize_imdb_id(b)


def parse_year(raw: Optional[str]) -> int:
    """
    Parse an upstream year string into an integer.

    Upstream years may be a bare year ("1999") or a range ("1999-2000",
    "2019–"). Only the leading 4-digit group is significant.

    Args:
        raw: Year string as reported by the provider

    Returns:
        Leading year as int, or UNKNOWN_YEAR when it cannot be parsed
    """
    if not isinstance(raw, str):
        return UNKNOWN_YEAR
    match = _LEADING_YEAR.match(raw)
    return int(match.group(1)) if match else UNKNOWN_YEAR
