"""Tolerant numeric field parsing for claim feature properties.

Claim properties come from hand-maintained GeoJSON files, so numeric fields can
be missing, textual, negative or otherwise malformed. Every helper here maps
such values to zero instead of raising.
"""

from __future__ import annotations

import math

_DOMAIN_CLAIM_NULL_SENTINELS = frozenset({"", "-", "--", "n/a", "na", "null", "none"})


def domain_parse_non_negative_float(value: object | None) -> float:
    """Parse one numeric claim field into a non-negative float.

    Args:
        value: Candidate value from feature properties.

    Returns:
        float: Parsed value, or 0.0 when missing, malformed, non-finite or negative.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        candidate = float(value)
    elif isinstance(value, str):
        normalized_value = value.strip().replace(",", "")
        if normalized_value.lower() in _DOMAIN_CLAIM_NULL_SENTINELS:
            return 0.0
        try:
            candidate = float(normalized_value)
        except ValueError:
            return 0.0
    else:
        return 0.0

    if not math.isfinite(candidate) or candidate < 0:
        return 0.0
    return candidate


def domain_parse_non_negative_int(value: object | None) -> int:
    """Parse one count claim field into a non-negative integer.

    Args:
        value: Candidate value from feature properties.

    Returns:
        int: Parsed value, or 0 when missing, malformed, negative or non-integral.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(value, int) and not isinstance(value, bool):
        return value if value >= 0 else 0

    candidate = domain_parse_non_negative_float(value)
    if not candidate.is_integer():
        return 0
    return int(candidate)
