"""Custom exceptions and exit codes for SPECKIT.

This module defines the exit codes and exception hierarchy used by the
command handlers. Expected conditions such as a missing tool are reported
through the step tracker instead and never raised.
"""

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    These codes are used for consistent error reporting and can be
    checked by calling scripts or CI systems.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENTS = 2
    PROJECT_EXISTS = 3
    USER_CANCELLED = 4
    GIT_ERROR = 5


class SpeckitError(Exception):
    """Base exception for SPECKIT errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.

    Attributes:
        exit_code: The exit code to use when this exception causes program termination
        message: The error message
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message describing what went wrong
            exit_code: Optional override for the default exit code
        """
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception.

        Returns:
            The instance exit code if set, otherwise the class default exit code.
        """
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class InvalidArgumentsError(SpeckitError):
    """Command-line arguments are inconsistent or out of range.

    Raised when:
    - Both a project name and --here are given, or neither is
    - --ai names an unknown assistant
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.INVALID_ARGUMENTS


class ProjectExistsError(SpeckitError):
    """The target project directory already exists.

    Attributes:
        path: The conflicting directory
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.PROJECT_EXISTS

    def __init__(self, path, exit_code: ExitCode | None = None) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' already exists", exit_code)


class UserCancelledError(SpeckitError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C at a prompt
    - User answers 'no' to a required confirmation
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


class GitOperationError(SpeckitError):
    """Git operation failed.

    Raised when:
    - git init fails
    - Staging or the initial commit fails
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GIT_ERROR


__all__ = [
    "ExitCode",
    "SpeckitError",
    "InvalidArgumentsError",
    "ProjectExistsError",
    "UserCancelledError",
    "GitOperationError",
]
