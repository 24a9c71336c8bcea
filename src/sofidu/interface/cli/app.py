from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults
with command-line overrides, eager validation, the analysis run and the
final write of the report to stdout.
"""

import dataclasses
import sys
from typing import List, Optional

from sofidu.core.engine import run_analysis
from sofidu.core.validator import validate_settings
from sofidu.domain.errors import ConfigurationError
from sofidu.infra.logging import LoggingConfig, configure_logging, get_logger
from sofidu.interface.cli import args as cli_args
from sofidu.utils.palette import color_enabled

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    overrides = cli_args.args_to_overrides(args)

    try:
        settings, warnings = validate_settings(overrides)
    except ConfigurationError as e:
        logger.debug(f"Configuration rejected: {e}")
        print(f"Error: {e}")
        return EXIT_FAILURE

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    settings = dataclasses.replace(settings, color=color_enabled(settings.color, sys.stdout))

    try:
        result = run_analysis(settings)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Analysis failed: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger.info(f"Analysis of '{settings.path}' completed in {result.elapsed:.3f}s")
    sys.stdout.write(result.output)
    sys.stdout.flush()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
