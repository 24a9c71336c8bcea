from __future__ import annotations

"""
Unit tests for the tree and list renderers.

Asserts exact rendered strings for a fixed in-memory tree, the threshold
propagation rules of tree mode, per-entry filtering of list mode, and the
textual line reversal.
"""

import pytest

from sofidu.core.analysis.tree_renderer import (
    format_line,
    render_list,
    render_tree,
    reverse_lines,
)
from sofidu.domain.tree_models import Node

FOO_TREE_TEXT = (
    "foo/ 3.0GB\n"
    "| bar/ 4.3KB (0.0%)\n"
    "| | biz 333B (7.7%)\n"
    "| baz 3.0GB (100.0%)\n"
)


def _rendered_names(text: str):
    return [line.lstrip("| ").split(" ")[0] for line in text.splitlines()]


# -----------------------------------------------------------------------------
# format_line
# -----------------------------------------------------------------------------

def test_format_line_directory_and_file():
    assert format_line(Node(path="a/dir", size=2100, is_dir=True), False) == "dir/ 2.1KB"
    assert format_line(Node(path="a/f.txt", size=12), False) == "f.txt 12B"
    assert format_line(Node(path="a/f.txt", size=12), True) == "a/f.txt 12B"


def test_format_line_machine_readable_and_percentage():
    node = Node(path="x/y", size=250)
    assert format_line(node, False, machine_readable=True, parent_size=1000) == "y 250 (25.0%)"


def test_format_line_zero_parent_size_shows_full_share():
    assert format_line(Node(path="e/x", size=0), False, parent_size=0) == "x 0B (100.0%)"


def test_format_line_color_wraps_fragments():
    line = format_line(Node(path="d", size=5, is_dir=True), True, color=True)
    assert "\x1b[" in line
    assert "d/" in line
    assert "5B" in line


# -----------------------------------------------------------------------------
# render_tree
# -----------------------------------------------------------------------------

def test_render_tree_without_threshold(foo_tree):
    text, passed = render_tree(foo_tree)

    assert text == FOO_TREE_TEXT
    assert passed is True


def test_render_tree_machine_readable(foo_tree):
    text, _ = render_tree(foo_tree, machine_readable=True)

    assert text == (
        "foo/ 3000241762\n"
        "| bar/ 4333 (0.0%)\n"
        "| | biz 333 (7.7%)\n"
        "| baz 3000233333 (100.0%)\n"
    )


def test_render_tree_threshold_prunes_small_leaves(foo_tree):
    text, passed = render_tree(foo_tree, size_threshold=4_000)

    assert passed is True
    assert text == (
        "foo/ 3.0GB\n"
        "| bar/ 4.3KB (0.0%)\n"
        "| baz 3.0GB (100.0%)\n"
    )


def test_render_tree_threshold_drops_whole_branch(foo_tree):
    text, _ = render_tree(foo_tree, size_threshold=1_000_000)

    assert text == (
        "foo/ 3.0GB\n"
        "| baz 3.0GB (100.0%)\n"
    )


def test_render_tree_low_threshold_keeps_everything(foo_tree):
    text, _ = render_tree(foo_tree, size_threshold=300)
    assert text == FOO_TREE_TEXT


def test_render_tree_root_always_printed():
    root = Node(path="small", size=10, is_dir=True, children=[Node(path="small/a", size=10)])

    text, passed = render_tree(root, size_threshold=1_000)

    assert text == "small/ 10B\n"
    assert passed is False


def test_render_tree_descendant_pass_keeps_ancestor_heading():
    # Sizes are hand-picked so the intermediate directory fails on its own
    leaf = Node(path="r/mid/big", size=500)
    mid = Node(path="r/mid", size=10, is_dir=True, children=[leaf, Node(path="r/mid/tiny", size=1)])
    root = Node(path="r", size=5, is_dir=True, children=[mid, Node(path="r/other", size=2)])

    text, passed = render_tree(root, size_threshold=100)

    assert passed is True
    assert _rendered_names(text) == ["r/", "mid/", "big"]


@pytest.mark.parametrize("threshold", [1, 333, 334, 4_333, 4_334, 3_000_233_333, 3_000_241_763])
def test_render_tree_threshold_invariant(foo_tree, threshold):
    text, _ = render_tree(foo_tree, size_threshold=threshold)
    shown = _rendered_names(text)[1:]

    def reaches(node: Node) -> bool:
        return node.size >= threshold or any(reaches(c) for c in node.children)

    expected = []

    def collect(node: Node) -> None:
        for child in node.children:
            if reaches(child):
                expected.append(child.name + ("/" if child.is_dir else ""))
                collect(child)

    collect(foo_tree)
    assert shown == expected


def test_render_tree_preserves_child_order_after_sort(foo_tree):
    foo_tree.sort()
    text, _ = render_tree(foo_tree)

    assert _rendered_names(text) == ["foo/", "baz", "bar/", "biz"]


# -----------------------------------------------------------------------------
# render_list
# -----------------------------------------------------------------------------

def test_render_list_full_paths_without_percentage(foo_tree):
    assert render_list(foo_tree) == (
        "foo/ 3.0GB\n"
        "foo/bar/ 4.3KB\n"
        "foo/bar/biz 333B\n"
        "foo/baz 3.0GB\n"
    )


def test_render_list_only_files(foo_tree):
    assert render_list(foo_tree, only_files=True) == (
        "foo/bar/biz 333B\n"
        "foo/baz 3.0GB\n"
    )


def test_render_list_threshold_is_per_entry(foo_tree):
    assert render_list(foo_tree, size_threshold=4_000, machine_readable=True) == (
        "foo/ 3000241762\n"
        "foo/bar/ 4333\n"
        "foo/baz 3000233333\n"
    )


def test_render_list_only_files_and_threshold(foo_tree):
    assert render_list(foo_tree, only_files=True, size_threshold=4_000) == "foo/baz 3.0GB\n"


# -----------------------------------------------------------------------------
# reverse_lines
# -----------------------------------------------------------------------------

def test_reverse_lines():
    assert reverse_lines("a\nb\nc\n") == "c\nb\na\n"
    assert reverse_lines("a\nb") == "b\na\n"
    assert reverse_lines("") == ""


def test_reverse_tree_output(foo_tree):
    text, _ = render_tree(foo_tree)
    assert reverse_lines(text).splitlines() == list(reversed(FOO_TREE_TEXT.splitlines()))
