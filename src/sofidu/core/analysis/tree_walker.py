from __future__ import annotations

"""
Concurrent Directory Walker.

Measures a directory tree with a bounded thread pool. Every directory is
one job: the job reads the directory's own metadata, sums the sizes of
its files and lists its subdirectories. Finished jobs schedule jobs for
those subdirectories. The scheduler folds each directory's total into its
parent as soon as the last of its subdirectories has finished, so sizes
flow bottom-up without recursion and without state shared by workers.

Only directories inside the depth budget keep their individual entries;
deeper levels are reduced to a byte count as soon as they are scanned.

Filesystem errors never abort the walk: an entry that cannot be read
contributes zero bytes and is left out of the tree.
"""

import logging
import os
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from sofidu.domain.constants import UNLIMITED_DEPTH
from sofidu.domain.tree_models import Node

logger = logging.getLogger(__name__)

_InodeKey = Tuple[int, int]

# -----------------------------------------------------------------------------
# JOB RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class _Entry:
    """A classified directory entry. `size` is only meaningful for files."""
    path: str
    is_dir: bool
    size: int = 0


@dataclass(frozen=True)
class _DirScan:
    """
    Result of scanning one directory (non-recursive).

    Attributes:
        path: Directory that was scanned.
        parent: Path of the parent directory, None for the walk root.
        depth: Depth budget the directory was reached with.
        local_size: Own metadata size plus the sizes of its regular files.
        entries: Files and subdirectories in enumeration order; only kept
                 when `depth` is positive.
        subdirs: Subdirectories to schedule.
        lineage: Inode keys of the directory and its ancestors; only
                 tracked when following symbolic links.
        skipped: The directory is one of its own ancestors.
    """
    path: str
    parent: Optional[str]
    depth: int
    local_size: int = 0
    entries: Tuple[_Entry, ...] = ()
    subdirs: Tuple[str, ...] = ()
    lineage: Optional[FrozenSet[_InodeKey]] = None
    skipped: bool = False

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def walk_dir(
        path: str,
        depth: int = UNLIMITED_DEPTH,
        follow_symlinks: bool = False,
        max_workers: Optional[int] = None,
) -> Node:
    """
    Build a size-annotated tree rooted at `path`.

    Sizes are always aggregated over the whole subtree. Children are only
    materialized while the depth budget of their parent is positive, so a
    budget of 0 yields the root with its full size and no children.

    Args:
        path: Root of the walk. A file yields a single childless node.
        depth: Depth budget, or UNLIMITED_DEPTH.
        follow_symlinks: Classify and measure entries through symbolic links.
        max_workers: Thread pool size (executor default when None).

    Returns:
        Node: The fully populated root node.
    """
    logger.info(f"Walking directory tree: {path}")
    started = time.perf_counter()

    if not os.path.isdir(path):
        return Node.from_path(path, _stat_size(path))

    walk = _TreeFold()
    root = walk.run(path, max(depth, 0), follow_symlinks, max_workers)

    logger.debug(
        f"Walk finished: {walk.directories} directories, {root.size} bytes "
        f"in {time.perf_counter() - started:.3f}s"
    )
    return root

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (SCHEDULING AND AGGREGATION)
# -----------------------------------------------------------------------------

class _TreeFold:
    """
    Scheduler-side state of one walk. Only touched by the thread that calls
    `run`; workers just return _DirScan values.
    """

    def __init__(self) -> None:
        self.open_scans: Dict[str, _DirScan] = {}
        self.totals: Dict[str, int] = {}
        self.remaining: Dict[str, int] = {}
        self.built: Dict[str, Node] = {}
        self.directories = 0

    def run(
            self,
            root: str,
            depth: int,
            follow_symlinks: bool,
            max_workers: Optional[int],
    ) -> Node:
        lineage: Optional[FrozenSet[_InodeKey]] = frozenset() if follow_symlinks else None

        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="WalkWorker") as executor:
            pending: Set[Future[_DirScan]] = {
                executor.submit(_scan_directory, root, None, depth, follow_symlinks, lineage)
            }
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    scan = future.result()
                    for sub in scan.subdirs:
                        pending.add(executor.submit(
                            _scan_directory, sub, scan.path, scan.depth - 1, follow_symlinks, scan.lineage
                        ))
                    self._add(scan)

        return self.built.pop(root)

    def _add(self, scan: _DirScan) -> None:
        """Record a finished scan and fold every directory it completes."""
        self.directories += 1
        self.open_scans[scan.path] = scan
        self.totals[scan.path] = scan.local_size
        self.remaining[scan.path] = len(scan.subdirs)
        if not scan.subdirs:
            self._fold_upwards(scan.path)

    def _fold_upwards(self, path: Optional[str]) -> None:
        """Close `path` and every ancestor whose last subdirectory it was."""
        while path is not None:
            scan = self.open_scans.pop(path)
            total = self.totals.pop(path)
            del self.remaining[path]

            if scan.skipped:
                total = 0
            elif scan.depth >= 0:
                self.built[path] = self._build_node(scan, total)

            parent = scan.parent
            if parent is None:
                return
            self.totals[parent] += total
            self.remaining[parent] -= 1
            if self.remaining[parent]:
                return
            path = parent

    def _build_node(self, scan: _DirScan, total: int) -> Node:
        """Materialize a closed directory; its subdirectories are already built."""
        children: List[Node] = []
        for entry in scan.entries:
            if entry.is_dir:
                child = self.built.pop(entry.path, None)
                if child is None:
                    continue
            else:
                child = Node(path=entry.path, size=entry.size, is_dir=False)
            children.append(child)
        return Node(path=scan.path, size=total, is_dir=True, children=children)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (FILESYSTEM ACCESS)
# -----------------------------------------------------------------------------

def _scan_directory(
        path: str,
        parent: Optional[str],
        depth: int,
        follow_symlinks: bool,
        lineage: Optional[FrozenSet[_InodeKey]],
) -> _DirScan:
    """
    Read one directory without recursing.

    With a lineage (symlinks followed), a directory that is one of its own
    ancestors comes back marked as skipped.
    """
    own_size = 0
    try:
        st = os.stat(path)
    except OSError as e:
        logger.debug(f"Cannot stat '{path}': {e}")
    else:
        own_size = st.st_size
        if lineage is not None:
            key = (st.st_dev, st.st_ino)
            if key in lineage:
                logger.debug(f"Skipping directory cycle at '{path}'")
                return _DirScan(path=path, parent=parent, depth=depth, skipped=True)
            lineage = lineage | {key}

    keep_entries = depth > 0
    file_bytes = 0
    entries: List[_Entry] = []
    subdirs: List[str] = []
    try:
        with os.scandir(path) as it:
            for dir_entry in it:
                entry = _classify(dir_entry, follow_symlinks)
                if entry is None:
                    continue
                if entry.is_dir:
                    subdirs.append(entry.path)
                else:
                    file_bytes += entry.size
                if keep_entries:
                    entries.append(entry)
    except OSError as e:
        logger.debug(f"Cannot list '{path}': {e}")

    return _DirScan(
        path=path,
        parent=parent,
        depth=depth,
        local_size=own_size + file_bytes,
        entries=tuple(entries),
        subdirs=tuple(subdirs),
        lineage=lineage,
    )


def _classify(dir_entry: os.DirEntry, follow_symlinks: bool) -> Optional[_Entry]:
    """Classify an entry as directory or file; anything else is skipped."""
    try:
        if dir_entry.is_dir(follow_symlinks=follow_symlinks):
            return _Entry(path=dir_entry.path, is_dir=True)
        if dir_entry.is_file(follow_symlinks=follow_symlinks):
            size = dir_entry.stat(follow_symlinks=follow_symlinks).st_size
            return _Entry(path=dir_entry.path, is_dir=False, size=size)
    except OSError as e:
        logger.debug(f"Skipping unreadable entry '{dir_entry.path}': {e}")
    return None


def _stat_size(path: str) -> int:
    try:
        return os.stat(path).st_size
    except OSError:
        return 0
