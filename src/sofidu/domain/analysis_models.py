from __future__ import annotations

"""
Analysis Domain Data Models.

Result object handed from the engine to the interface layer.
"""

from dataclasses import dataclass

from sofidu.domain.tree_models import Node


@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of a complete analysis run.

    Attributes:
        root: The walked (and possibly sorted) tree.
        output: Rendered text, newline-terminated lines.
        elapsed: Wall-clock seconds spent walking and rendering.
    """
    root: Node
    output: str
    elapsed: float
