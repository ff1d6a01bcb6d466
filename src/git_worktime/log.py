"""Logging setup for the command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "git_worktime"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send package log records to stderr through rich."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
