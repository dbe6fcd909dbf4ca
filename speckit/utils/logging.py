"""Logging configuration for SPECKIT.

File logging is controlled by environment variables and is off by default.
The --debug flag additionally routes DEBUG records to the terminal through
Rich.

Environment Variables:
    SPECKIT_LOG: Set to "true" to enable logging (default: "false")
    SPECKIT_LOG_FILE: Path to log file (default: ~/.speckit.log)
"""

import logging
import os
from pathlib import Path

from rich.logging import RichHandler

# Environment variable configuration
LOG_ENABLED = os.environ.get("SPECKIT_LOG", "false").lower() == "true"
LOG_FILE = Path(os.environ.get("SPECKIT_LOG_FILE", str(Path.home() / ".speckit.log")))

# Module-level logger instance
_logger: logging.Logger | None = None


def setup_logging() -> logging.Logger:
    """Configure logging based on environment variables.

    Creates a logger that writes to the configured log file when
    SPECKIT_LOG is set to "true". Otherwise, uses a NullHandler
    to suppress all log output.

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger("speckit")

    # Clear any existing handlers
    logger.handlers.clear()

    if LOG_ENABLED:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(LOG_FILE)
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def enable_debug_logging() -> None:
    """Echo DEBUG records to the terminal.

    Used by --debug. The file handler, if any, stays in place.
    """
    from speckit.utils.console import console_err

    logger = get_logger()
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return

    handler = RichHandler(console=console_err, show_path=False, markup=False)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def get_logger() -> logging.Logger:
    """Get the configured logger instance.

    Returns:
        The configured logger, creating it if necessary
    """
    global _logger
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str) -> None:
    """Log a message if logging is enabled.

    Args:
        message: Message to log
    """
    logger = get_logger()
    logger.info(message)


def log_command(command: str, exit_code: int = 0) -> None:
    """Log command execution with exit code.

    Used to track external command execution (git, which, etc.)
    for debugging purposes.

    Args:
        command: The command that was executed
        exit_code: The exit code returned by the command
    """
    logger = get_logger()
    logger.info(f"COMMAND: {command} | EXIT_CODE: {exit_code}")


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "enable_debug_logging",
    "get_logger",
    "log_message",
    "log_command",
]
