from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node type produced by the walker and consumed by
the renderer. A node owns its children exclusively; there are no parent
back-references.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Node:
    """
    Represents one filesystem entry with its aggregated size.

    Attributes:
        path: Filesystem path, as reached from the walk root.
        size: Total bytes. Own length for a file, recursive sum for a directory.
        is_dir: Whether the entry is a directory.
        children: Materialized child nodes. Empty for files and for
                  directories beyond the depth budget.
    """
    path: str
    size: int
    is_dir: bool = False
    children: List[Node] = field(default_factory=list)

    @classmethod
    def from_path(cls, path: str, size: int, children: Optional[List[Node]] = None) -> Node:
        """Build a node, classifying it from the path's metadata."""
        return cls(
            path=path,
            size=size,
            is_dir=os.path.isdir(path),
            children=list(children or []),
        )

    @property
    def name(self) -> str:
        """Base name of the entry, falling back to the full path for roots."""
        return os.path.basename(os.path.normpath(self.path)) or self.path

    def sort(self) -> None:
        """
        Reorder children by descending size, recursively.

        Equal sizes keep their enumeration order. Sizes and node identities
        are left untouched.
        """
        self.children.sort(key=lambda child: child.size, reverse=True)
        for child in self.children:
            child.sort()

    def clone_childless(self) -> Node:
        return Node(path=self.path, size=self.size, is_dir=self.is_dir)

    def flatten(self) -> List[Node]:
        """
        Project the tree into a pre-order list of childless copies.

        Returns:
            List[Node]: This node first, followed by every descendant.
        """
        nodes = [self.clone_childless()]
        for child in self.children:
            nodes.extend(child.flatten())
        return nodes
