from __future__ import annotations

"""
Size Conversion Utilities.

Converts between raw byte counts and base-1000 human-readable strings
(B, KB, MB, GB).
"""

import math

from sofidu.domain.constants import HUMAN_BUCKETS, SUPPORTED_UNITS_LABEL, UNIT_MULTIPLIERS
from sofidu.domain.errors import InvalidUnitError, SizeParseError

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def size_to_human(size: int) -> str:
    """
    Format a byte count with a base-1000 unit.

    The unit is chosen by the decimal exponent of the count: exponents 0-2
    stay in bytes, 3-5 use KB, 6-8 use MB and anything above uses GB.

    Args:
        size: Number of bytes.

    Returns:
        str: e.g. "999B", "2.1KB", "5.0GB".
    """
    if size <= 0:
        return f"{size}B"

    exponent = int(math.floor(math.log10(size)))
    for lowest_exp, divisor, suffix in HUMAN_BUCKETS:
        if exponent >= lowest_exp:
            return f"{size / divisor:.1f}{suffix}"
    return f"{size}B"


def human_to_size(text: str) -> int:
    """
    Parse a human-readable size string into a byte count.

    The string is split at its first letter: the leading part is read as a
    float, the trailing part as a case-insensitive unit. The product is
    truncated to an integer.

    Args:
        text: e.g. "200", "500KB", "1.5g".

    Returns:
        int: Number of bytes.

    Raises:
        InvalidUnitError: If the unit suffix is not recognized.
        SizeParseError: If the numeric part is not a valid non-negative number.
    """
    raw = text.strip()
    split_at = next((i for i, ch in enumerate(raw) if ch.isascii() and ch.isalpha()), len(raw))
    value_part, unit_part = raw[:split_at], raw[split_at:]

    unit = unit_part.upper()
    if unit not in UNIT_MULTIPLIERS:
        raise InvalidUnitError(unit, SUPPORTED_UNITS_LABEL)

    value = _parse_value(value_part)
    return int(value * UNIT_MULTIPLIERS[unit])

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_value(value_part: str) -> float:
    """Read the numeric portion of a size string."""
    try:
        value = float(value_part)
    except ValueError:
        raise SizeParseError(value_part) from None

    if value < 0 or not math.isfinite(value):
        raise SizeParseError(value_part)
    return value
