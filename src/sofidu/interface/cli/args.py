from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides. Values are kept raw (strings) here; the
validator owns their interpretation so that every input problem is
reported the same way.
"""

import argparse
from typing import Any, Dict

from sofidu import __version__

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sofidu CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="sofidu",
        description="Measure the disk usage of a directory tree.",
    )

    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to analyze (default: current directory).",
    )

    # --- Walk Scope ---
    p.add_argument(
        "-d", "--depth",
        default=None,
        metavar="N",
        help="Levels of entries to display; -1 for unlimited (default: 1).",
    )
    p.add_argument(
        "-L", "--follow-symlinks",
        dest="follow_symlinks",
        action="store_true",
        help="Follow symbolic links while walking.",
    )

    # --- Presentation ---
    p.add_argument(
        "-s", "--sort",
        action="store_true",
        help="Sort entries by descending size at every level.",
    )
    p.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="Reverse the order of the output lines.",
    )
    p.add_argument(
        "-l", "--list",
        dest="list_mode",
        action="store_true",
        help="Print a flat list of full paths instead of a tree.",
    )
    p.add_argument(
        "-m", "--machine-readable",
        dest="machine_readable",
        action="store_true",
        help="Print sizes as raw byte counts.",
    )
    p.add_argument(
        "-f", "--only_files", "--only-files",
        dest="only_files",
        action="store_true",
        help="With --list, omit directories.",
    )
    p.add_argument(
        "-t", "--threshold",
        default=None,
        metavar="SIZE",
        help="Hide entries smaller than SIZE (e.g. 200, 500KB, 1GB).",
    )
    p.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Disable colored output.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to a rotating log file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "path": args.path,
        "depth": args.depth,
        "threshold": args.threshold,
    }

    if args.sort:
        overrides["sort"] = True
    if args.reverse:
        overrides["reverse"] = True
    if args.list_mode:
        overrides["list"] = True
    if args.machine_readable:
        overrides["machine_readable"] = True
    if args.only_files:
        overrides["only_files"] = True
    if args.follow_symlinks:
        overrides["follow_symlinks"] = True
    if args.no_color:
        overrides["color"] = False

    return overrides
