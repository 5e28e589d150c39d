"""Errors raised while preparing a command, each carrying its exit status."""

from __future__ import annotations

__all__ = [
    "EXIT_CMD_NOT_FOUND",
    "EXIT_PERMISSION_DENIED",
    "PipexError",
    "CommandNotFoundError",
    "PermissionDeniedError",
]

EXIT_CMD_NOT_FOUND = 127
EXIT_PERMISSION_DENIED = 126


class PipexError(Exception):
    """A failure that ends one stage of the pipeline with ``exit_code``."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class CommandNotFoundError(PipexError):
    """The command could not be located."""

    def __init__(self, message: str):
        super().__init__(message, EXIT_CMD_NOT_FOUND)


class PermissionDeniedError(PipexError):
    """The command was found but cannot be run."""

    def __init__(self, message: str):
        super().__init__(message, EXIT_PERMISSION_DENIED)