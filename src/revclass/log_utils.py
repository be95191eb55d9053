"""Logging utilities for RevClass."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(quiet: bool = False) -> None:
    """Configures the logging for the application.

    Log records go to stderr so that class names written to stdout stay
    machine-readable; verbose by default is therefore safe for pipelines, and
    shows which lines were skipped as non-rows.

    Args:
        quiet: If True, set log level to WARNING (show only warnings/errors).
               If False (default), set to DEBUG (verbose mode).
    """
    level = logging.WARNING if quiet else logging.DEBUG

    # Only configure if not already configured (prevents multiple calls)
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="[%X]",
            # Truth table lines are echoed in debug logs; never render them as markup
            handlers=[
                RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)
            ],
        )
    else:
        logging.getLogger().setLevel(level)
