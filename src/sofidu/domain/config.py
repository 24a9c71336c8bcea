from __future__ import annotations

"""
Configuration Domain Models.

Holds the default runtime configuration (a plain dictionary, merged with
command-line overrides) and the validated, immutable settings object the
engine runs from.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# Configuration Models
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AppSettings:
    """
    Validated settings for a single analysis run.

    Attributes:
        path: Root directory to analyze.
        depth: Depth budget for materialized nodes (UNLIMITED_DEPTH if unbounded).
        sort: Sort children by descending size before rendering.
        reverse: Reverse the rendered line order.
        list_mode: Render a flat list instead of a tree.
        machine_readable: Render raw byte counts.
        only_files: Drop directory entries in list mode.
        threshold: Minimum size in bytes, or None when no filtering applies.
        follow_symlinks: Traverse symbolic links during the walk.
        color: Colorize the rendered output.
    """
    path: str
    depth: int
    sort: bool = False
    reverse: bool = False
    list_mode: bool = False
    machine_readable: bool = False
    only_files: bool = False
    threshold: Optional[int] = None
    follow_symlinks: bool = False
    color: bool = False


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Values are raw (as typed on a command line); the validator turns them
    into an AppSettings instance.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "path": ".",
        "depth": "1",
        "sort": False,
        "reverse": False,
        "list": False,
        "machine_readable": False,
        "only_files": False,
        "threshold": None,
        "follow_symlinks": False,
        "color": True,
    }
