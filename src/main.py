"""Command-line Entry Point.

This module provides the entry point for the balance calculator.
It's a thin wrapper that reads the arguments, invokes the orchestrator
and prints whatever the orchestrator decided.
"""

import logging
import os
import sys

from src.orchestrator import Orchestrator, DEFAULT_PROGRAM


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.WARNING),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _program_name(argv0: str | None) -> str:
    if not argv0:
        return DEFAULT_PROGRAM
    name = os.path.basename(argv0)
    # python -m src.main / python main.py
    if name in ("main.py", "__main__.py", "-c"):
        return DEFAULT_PROGRAM
    return name


def main(argv: list[str] | None = None) -> int:
    """Run the balance calculator.

    Args:
        argv: Full argument vector including the program name.
              Defaults to sys.argv.

    Returns:
        Process exit code (0 on success, 1 on any error)
    """
    if argv is None:
        argv = sys.argv

    orchestrator = Orchestrator(program=_program_name(argv[0] if argv else None))
    result = orchestrator.run(list(argv[1:]))

    if not result.success:
        for error in result.errors:
            print(error, file=sys.stderr)
        return result.exit_code

    print(result.output)
    return result.exit_code


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
