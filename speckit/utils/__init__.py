"""Utility modules for SPECKIT.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from speckit.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
    show_banner,
)
from speckit.utils.errors import (
    ExitCode,
    GitOperationError,
    InvalidArgumentsError,
    ProjectExistsError,
    SpeckitError,
    UserCancelledError,
)
from speckit.utils.logging import log_command, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "show_banner",
    # Errors
    "ExitCode",
    "SpeckitError",
    "InvalidArgumentsError",
    "ProjectExistsError",
    "UserCancelledError",
    "GitOperationError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
]
