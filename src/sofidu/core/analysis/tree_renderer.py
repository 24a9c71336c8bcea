from __future__ import annotations

"""
Tree Renderer.

Converts size-annotated Node trees into text, either as an indented tree
(with parent percentages and threshold propagation) or as a flat list of
full paths.
"""

import os
from typing import List, Optional, Tuple

from sofidu.domain.constants import INDENT_MARKER
from sofidu.domain.tree_models import Node
from sofidu.utils.palette import paint
from sofidu.utils.size_format import size_to_human

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_line(
        node: Node,
        full_path: bool,
        machine_readable: bool = False,
        parent_size: Optional[int] = None,
        color: bool = False,
) -> str:
    """
    Render a single entry: name, size and optional share of its parent.

    Args:
        node: Entry to describe.
        full_path: Show the path as given instead of the base name.
        machine_readable: Show raw bytes instead of scaled units.
        parent_size: Size of the parent, enables the percentage suffix.
        color: Wrap fragments in ANSI styles.

    Returns:
        str: The line, without indentation or newline.
    """
    name = node.path if full_path else node.name
    if node.is_dir and not name.endswith(os.sep):
        name += os.sep

    size = str(node.size) if machine_readable else size_to_human(node.size)

    if color:
        name = paint(name, "dir" if node.is_dir else "file")
        size = paint(size, "size")

    line = f"{name} {size}"

    if parent_size is not None:
        percent = f"({_percent_of(node.size, parent_size):.1f}%)"
        line += " " + (paint(percent, "percent") if color else percent)

    return line


def render_tree(
        node: Node,
        depth: int = 0,
        size_threshold: Optional[int] = None,
        machine_readable: bool = False,
        parent_size: Optional[int] = None,
        color: bool = False,
) -> Tuple[str, bool]:
    """
    Recursively render `node` and its children as an indented tree.

    With a threshold, a child is printed only if it or one of its
    descendants reaches the threshold; the filtering is applied at every
    level. The node passed in is always printed.

    Args:
        node: Subtree root.
        depth: Indentation level; the full path is shown at level 0.
        size_threshold: Minimum size in bytes, or None to keep everything.
        machine_readable: Show raw bytes instead of scaled units.
        parent_size: Size of the parent node, if any.
        color: Wrap fragments in ANSI styles.

    Returns:
        Tuple[str, bool]: The rendered text and whether this node or
                          anything beneath it passed the threshold.
    """
    passed = size_threshold is None or node.size >= size_threshold

    parts: List[str] = [
        INDENT_MARKER * depth
        + format_line(node, depth == 0, machine_readable, parent_size, color)
        + "\n"
    ]

    for child in node.children:
        child_text, child_passed = render_tree(
            child, depth + 1, size_threshold, machine_readable, node.size, color
        )
        if size_threshold is None:
            parts.append(child_text)
        elif child_passed:
            parts.append(child_text)
            passed = True

    return "".join(parts), passed


def render_list(
        node: Node,
        only_files: bool = False,
        size_threshold: Optional[int] = None,
        machine_readable: bool = False,
        color: bool = False,
) -> str:
    """
    Render the flattened tree, one full path per line.

    Filters are applied per entry: directories are dropped with
    `only_files`, entries below `size_threshold` are dropped otherwise.
    """
    lines = []
    for entry in node.flatten():
        if only_files and entry.is_dir:
            continue
        if size_threshold is not None and entry.size < size_threshold:
            continue
        lines.append(format_line(entry, True, machine_readable, None, color) + "\n")
    return "".join(lines)


def reverse_lines(text: str) -> str:
    """Reverse the order of the lines in `text`, newline-terminating each."""
    return "".join(line + "\n" for line in reversed(text.splitlines()))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _percent_of(size: int, parent_size: int) -> float:
    if parent_size == 0:
        return 100.0
    return size / parent_size * 100
