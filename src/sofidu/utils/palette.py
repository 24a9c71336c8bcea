from __future__ import annotations

"""
Terminal Color Palette.

Wraps rendered fragments in ANSI styles using rich. Rendering code asks
for a role ("dir", "file", "size", "percent") instead of a raw style so
the look of the output is defined in one place.
"""

import os
import sys
from typing import Dict, TextIO

from rich.console import Console
from rich.text import Text

# -----------------------------------------------------------------------------
# STYLE TABLE
# -----------------------------------------------------------------------------

STYLES: Dict[str, str] = {
    "dir": "bright_blue",
    "file": "cyan",
    "size": "green",
    "percent": "yellow",
}

_console = Console(
    force_terminal=True,
    color_system="standard",
    no_color=False,
    highlight=False,
    emoji=False,
    markup=False,
    soft_wrap=True,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def paint(text: str, role: str) -> str:
    """
    Return `text` wrapped in the ANSI sequence for `role`.

    Args:
        text: Plain fragment to colorize.
        role: Key of STYLES.

    Returns:
        str: The styled fragment.
    """
    with _console.capture() as capture:
        _console.print(Text(text, style=STYLES[role]), end="")
    return capture.get()


def color_enabled(requested: bool, stream: TextIO = sys.stdout) -> bool:
    """
    Decide whether colored output should be produced.

    Color is off when not requested, when NO_COLOR is set, or when the
    target stream is not a terminal.
    """
    if not requested:
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
