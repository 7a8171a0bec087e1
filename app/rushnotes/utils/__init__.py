"""Utility modules for rushnotes.

This module exports commonly used utility functions.
"""

from rushnotes.utils.formatting import (
    console,
    create_project_table,
    err_console,
    print_error,
    print_info,
    print_success,
)
from rushnotes.utils.logging_utils import setup_logging

__all__ = [
    "console",
    "create_project_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "setup_logging",
]
