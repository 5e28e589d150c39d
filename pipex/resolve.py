"""Locating the executable for a command name."""

from __future__ import annotations

import errno
import os
from typing import Mapping

from pipex.errors import CommandNotFoundError
from pipex.textutils import split_words

__all__ = ["resolve_path"]

_PREFIX = "./pipex: "


def _explicit_path(cmd: str) -> str:
    try:
        os.stat(cmd)
    except OSError as exc:
        raise CommandNotFoundError(f"{_PREFIX}{cmd}: {exc.strerror}") from exc
    return cmd


def resolve_path(cmd: str, env: Mapping[str, str]) -> str:
    """Return the path to run for ``cmd``, searching ``env['PATH']`` if needed.

    A name holding a slash is used as is when it exists. Otherwise each
    directory of PATH is tried in order for an executable entry.
    """
    if "/" in cmd:
        return _explicit_path(cmd)
    path_env = env.get("PATH")
    if path_env is None:
        raise CommandNotFoundError(
            f"{_PREFIX}{cmd}: {os.strerror(errno.ENOENT)}"
        )
    for directory in split_words(path_env, ":"):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    raise CommandNotFoundError(f"{_PREFIX}{cmd}: command not found")