from __future__ import annotations

"""
sofidu - concurrent disk-usage analyzer.

Walks a directory tree, aggregates sizes and renders the result as a tree
or a flat list.
"""

__version__ = "0.3.0"
