"""Tests for speckit.utils.errors module."""

from pathlib import Path

import pytest

from speckit.utils.errors import (
    ExitCode,
    GitOperationError,
    InvalidArgumentsError,
    ProjectExistsError,
    SpeckitError,
    UserCancelledError,
)


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_values(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
        assert ExitCode.INVALID_ARGUMENTS == 2
        assert ExitCode.PROJECT_EXISTS == 3
        assert ExitCode.USER_CANCELLED == 4
        assert ExitCode.GIT_ERROR == 5

    def test_usable_as_int(self):
        assert int(ExitCode.GIT_ERROR) == 5


class TestSpeckitError:
    """Tests for the base exception."""

    def test_default_exit_code(self):
        assert SpeckitError("boom").exit_code == ExitCode.GENERAL_ERROR

    def test_override_exit_code(self):
        error = SpeckitError("boom", exit_code=ExitCode.GIT_ERROR)

        assert error.exit_code == ExitCode.GIT_ERROR

    def test_message(self):
        assert str(SpeckitError("boom")) == "boom"


class TestSubclasses:
    """Tests for specific exception types."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (InvalidArgumentsError("bad"), ExitCode.INVALID_ARGUMENTS),
            (ProjectExistsError(Path("demo")), ExitCode.PROJECT_EXISTS),
            (UserCancelledError("no"), ExitCode.USER_CANCELLED),
            (GitOperationError("git"), ExitCode.GIT_ERROR),
        ],
    )
    def test_exit_codes(self, error, code):
        assert isinstance(error, SpeckitError)
        assert error.exit_code == code

    def test_project_exists_message(self):
        error = ProjectExistsError(Path("demo"))

        assert error.path == Path("demo")
        assert str(error) == "Directory 'demo' already exists"

    def test_can_catch_as_base(self):
        with pytest.raises(SpeckitError):
            raise UserCancelledError("cancelled")
