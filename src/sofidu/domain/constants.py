from __future__ import annotations

"""
Domain Constants.

Shared sentinels and lookup tables used by the walker, the renderer and
the size-string converters.
"""

import sys
from typing import Dict, Tuple

# -----------------------------------------------------------------------------
# DEPTH BUDGET
# -----------------------------------------------------------------------------

# "-1" on the command line maps to the largest representable budget
UNLIMITED_DEPTH: int = sys.maxsize
UNLIMITED_DEPTH_FLAG: int = -1

# -----------------------------------------------------------------------------
# SIZE UNITS (BASE 1000)
# -----------------------------------------------------------------------------

UNIT_MULTIPLIERS: Dict[str, int] = {
    "": 1,
    "B": 1,
    "K": 1_000,
    "KB": 1_000,
    "M": 1_000_000,
    "MB": 1_000_000,
    "G": 1_000_000_000,
    "GB": 1_000_000_000,
}

SUPPORTED_UNITS_LABEL: str = "B, KB, MB, GB"

# (lowest decimal exponent, divisor, suffix), scanned from the top
HUMAN_BUCKETS: Tuple[Tuple[int, int, str], ...] = (
    (9, 1_000_000_000, "GB"),
    (6, 1_000_000, "MB"),
    (3, 1_000, "KB"),
)

# -----------------------------------------------------------------------------
# RENDERING GLYPHS
# -----------------------------------------------------------------------------

INDENT_MARKER: str = "| "
