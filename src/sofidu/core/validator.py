from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper in front of the walker: turns the raw configuration
dictionary (defaults merged with command-line overrides) into an immutable
AppSettings object. Every user-input problem is detected here, before any
filesystem walk begins.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from sofidu.domain.config import AppSettings, get_default_config
from sofidu.domain.constants import UNLIMITED_DEPTH, UNLIMITED_DEPTH_FLAG
from sofidu.domain.errors import ConfigurationError, SizeFormatError
from sofidu.utils.size_format import human_to_size

logger = logging.getLogger(__name__)

_BOOL_FIELDS = (
    "sort", "reverse", "list", "machine_readable",
    "only_files", "follow_symlinks", "color",
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_settings(config: Dict[str, Any]) -> Tuple[AppSettings, List[str]]:
    """
    Validate and normalize a raw configuration dictionary.

    Args:
        config: Raw values, typically strings from the command line.

    Returns:
        Tuple[AppSettings, List[str]]: The settings and non-fatal warnings.

    Raises:
        ConfigurationError: If the path, depth or threshold is unusable.
    """
    warnings: List[str] = []
    merged: Dict[str, Any] = get_default_config()
    # Unknown keys and unset (None) values keep the defaults
    merged.update({k: v for k, v in config.items() if k in merged and v is not None})

    path = _validate_path(merged["path"])
    depth = _parse_depth(merged["depth"])
    threshold = _parse_threshold(merged.get("threshold"))

    flags = {field: bool(merged[field]) for field in _BOOL_FIELDS}

    if flags["only_files"] and not flags["list"]:
        msg = "Option 'only_files' has no effect without list mode; ignoring it."
        warnings.append(msg)
        flags["only_files"] = False

    settings = AppSettings(
        path=path,
        depth=depth,
        sort=flags["sort"],
        reverse=flags["reverse"],
        list_mode=flags["list"],
        machine_readable=flags["machine_readable"],
        only_files=flags["only_files"],
        threshold=threshold,
        follow_symlinks=flags["follow_symlinks"],
        color=flags["color"],
    )
    logger.debug(f"Validated settings: {settings}")
    return settings, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _validate_path(path: Any) -> str:
    """Require an existing directory."""
    path = str(path)
    if not os.path.exists(path):
        raise ConfigurationError(f"Path does not exist: {path}")
    if not os.path.isdir(path):
        raise ConfigurationError(f"Path is not a directory: {path}")
    return path


def _parse_depth(value: Any) -> int:
    """Accept an integer >= 0, or -1 for an unlimited budget."""
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid depth: {value}")
    try:
        depth = int(str(value).strip())
    except ValueError:
        raise ConfigurationError(f"Invalid depth: {value}. Expected an integer >= -1.") from None

    if depth < UNLIMITED_DEPTH_FLAG:
        raise ConfigurationError(f"Invalid depth: {depth}. Expected an integer >= -1.")
    if depth == UNLIMITED_DEPTH_FLAG:
        return UNLIMITED_DEPTH
    return depth


def _parse_threshold(value: Optional[Any]) -> Optional[int]:
    """Convert a human-readable size string into bytes."""
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return human_to_size(str(value))
    except SizeFormatError as e:
        raise ConfigurationError(f"Invalid threshold '{value}': {e}") from e
