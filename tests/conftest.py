from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: a hand-built Node tree with known sizes and a real
   directory fixture on disk.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from sofidu.domain.tree_models import Node  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def foo_tree() -> Node:
    """
    Return an in-memory tree with fixed sizes.

    Structure:
    foo/            3_000_241_762  (4096 of own metadata)
      bar/                  4_333
        biz                   333
      baz           3_000_233_333
    """
    biz = Node(path="foo/bar/biz", size=333)
    bar = Node(path="foo/bar", size=4_333, is_dir=True, children=[biz])
    baz = Node(path="foo/baz", size=3_000_233_333)
    return Node(path="foo", size=3_000_241_762, is_dir=True, children=[bar, baz])


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """
    Create a small directory tree on disk.

    Structure:
    /root
      /bar
        biz          (333 bytes)
        /deep
          deeper.bin (1000 bytes)
      baz            (20000 bytes)
    """
    root = tmp_path / "root"
    root.mkdir()

    bar = root / "bar"
    bar.mkdir()
    (bar / "biz").write_bytes(b"b" * 333)

    deep = bar / "deep"
    deep.mkdir()
    (deep / "deeper.bin").write_bytes(b"d" * 1000)

    (root / "baz").write_bytes(b"z" * 20_000)

    return root


@pytest.fixture
def sample_sizes(sample_dir: Path) -> Callable[[], Dict[str, int]]:
    """
    Return a function computing the expected aggregated sizes of `sample_dir`.

    Directory metadata sizes are read at call time, since adding entries
    (e.g. symlinks) can change them on some filesystems.
    """
    def own(p: Path) -> int:
        return os.stat(p).st_size

    def measure() -> Dict[str, int]:
        deep = own(sample_dir / "bar" / "deep") + 1000
        bar = own(sample_dir / "bar") + 333 + deep
        root = own(sample_dir) + bar + 20_000
        return {"root": root, "bar": bar, "deep": deep}

    return measure


@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_sessionfinish():
    # pytest removes stale tmp_path trees with a recursive rmtree at session
    # end; the deep-chain walker test leaves ~1100 nested directories behind,
    # so lift the recursion limit only for that teardown.
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, 10000))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)
