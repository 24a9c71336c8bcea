from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a single analysis run:
1. Walks the filesystem into a Node tree.
2. Sorts the tree when requested.
3. Renders it as a tree or as a flat list.
4. Reverses the rendered lines when requested.
"""

import logging
import time

from sofidu.core.analysis.tree_renderer import render_list, render_tree, reverse_lines
from sofidu.core.analysis.tree_walker import walk_dir
from sofidu.domain.analysis_models import AnalysisResult
from sofidu.domain.config import AppSettings

logger = logging.getLogger(__name__)


def run_analysis(settings: AppSettings) -> AnalysisResult:
    """
    Execute the full analysis for validated settings.

    Args:
        settings: Output of the validator.

    Returns:
        AnalysisResult: The tree and its rendered text.
    """
    started = time.perf_counter()

    root = walk_dir(settings.path, settings.depth, settings.follow_symlinks)

    if settings.sort:
        root.sort()

    if settings.list_mode:
        output = render_list(
            root,
            only_files=settings.only_files,
            size_threshold=settings.threshold,
            machine_readable=settings.machine_readable,
            color=settings.color,
        )
    else:
        output, passed = render_tree(
            root,
            size_threshold=settings.threshold,
            machine_readable=settings.machine_readable,
            color=settings.color,
        )
        if not passed:
            logger.info("No entry reached the size threshold.")

    if settings.reverse:
        output = reverse_lines(output)

    elapsed = time.perf_counter() - started
    return AnalysisResult(root=root, output=output, elapsed=elapsed)
