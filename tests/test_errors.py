import pytest

from pipex.errors import (
    EXIT_CMD_NOT_FOUND,
    EXIT_PERMISSION_DENIED,
    CommandNotFoundError,
    PermissionDeniedError,
    PipexError,
)


def test_base_error_keeps_message_and_code():
    err = PipexError("broken", 3)
    assert err.message == "broken"
    assert str(err) == "broken"
    assert err.exit_code == 3


def test_base_error_default_code_is_failure():
    assert PipexError("x").exit_code == 1


def test_command_not_found_code():
    err = CommandNotFoundError("./pipex: foo: command not found")
    assert err.exit_code == EXIT_CMD_NOT_FOUND == 127
    assert str(err) == "./pipex: foo: command not found"


def test_permission_denied_code():
    err = PermissionDeniedError("denied")
    assert err.exit_code == EXIT_PERMISSION_DENIED == 126


@pytest.mark.parametrize(
    "cls, code",
    [(CommandNotFoundError, 127), (PermissionDeniedError, 126)],
)
def test_subclasses_caught_as_base(cls, code):
    err = cls("msg")
    assert isinstance(err, PipexError)
    assert err.message == "msg"
    assert str(err) == "msg"
    assert err.exit_code == code