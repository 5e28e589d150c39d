"""Turning a command string into something that can be executed."""

from __future__ import annotations

import errno
import os
from typing import Optional

from pipex.errors import (
    EXIT_CMD_NOT_FOUND,
    EXIT_PERMISSION_DENIED,
    CommandNotFoundError,
    PermissionDeniedError,
)
from pipex.linereader import LineReader
from pipex.textutils import split_words

__all__ = ["parse_command", "check_not_directory", "exit_code_for_errno"]

_PREFIX = "./pipex: "


class _FdStream:
    """Minimal readable wrapper over a raw descriptor."""

    def __init__(self, fd: int):
        self._fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self._fd, size)


def parse_command(cmd: str) -> list[str]:
    """Split ``cmd`` on spaces into the program name and its arguments."""
    args = split_words(cmd, " ")
    if not args:
        raise CommandNotFoundError(f"{_PREFIX}: command not found")
    return args


def check_not_directory(cmd_path: str, cmd_name: str) -> str:
    """Return ``cmd_path`` unless it opens but yields no readable line.

    A directory, or an empty file, raises PermissionDeniedError.
    """
    try:
        fd = os.open(cmd_path, os.O_RDONLY)
    except OSError:
        return cmd_path
    reason: Optional[str] = None
    try:
        line = LineReader(_FdStream(fd)).read_line()
    except OSError as exc:
        line = None
        reason = exc.strerror
    finally:
        os.close(fd)
    if not line:
        reason = reason or os.strerror(errno.EACCES)
        raise PermissionDeniedError(f"{_PREFIX}{cmd_name}: {reason}")
    return cmd_path


def exit_code_for_errno(err: int) -> int:
    """Map the errno of a failed exec to the exit status to report."""
    if err in (errno.EACCES, errno.EISDIR):
        return EXIT_PERMISSION_DENIED
    if err == errno.ENOENT:
        return EXIT_CMD_NOT_FOUND
    return 1