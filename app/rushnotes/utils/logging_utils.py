"""Logging setup for the rushnotes CLI."""

import logging

from rich.logging import RichHandler

from rushnotes.utils.formatting import err_console

LOGGER_NAME = "rushnotes"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach a Rich handler writing to stderr to the package logger.

    Args:
        verbose: Log debug messages.
        quiet: Only log warnings and errors. Ignored when verbose is set.

    Returns:
        The configured package logger.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers = []
    logger.propagate = False

    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
