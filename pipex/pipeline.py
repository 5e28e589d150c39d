"""Run ``cmd1 < infile | cmd2 > outfile`` and report the second status."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Mapping, Optional, Sequence, Union

from pipex.commands import check_not_directory, exit_code_for_errno, parse_command
from pipex.errors import PipexError
from pipex.resolve import resolve_path

__all__ = ["run_pipeline", "main"]

_PREFIX = "./pipex: "
_USAGE = "Usage: ./pipex file1 cmd1 cmd2 file2"
_FAILURE = 1


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


def _open_file(path: str, flags: int, mode: int = 0o644) -> int:
    try:
        return os.open(path, flags, mode)
    except OSError as exc:
        raise PipexError(f"{_PREFIX}{path}: {exc.strerror}", _FAILURE) from exc


def _start(
    cmd: str, env: Mapping[str, str], stdin: int, stdout: int
) -> Union[subprocess.Popen, int]:
    """Start ``cmd`` between two descriptors, or return its failure status."""
    args = parse_command(cmd)
    cmd_path = check_not_directory(resolve_path(args[0], env), args[0])
    try:
        return subprocess.Popen(
            args, executable=cmd_path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        _report(f"{_PREFIX}{args[0]}: {exc.strerror}")
        return exit_code_for_errno(exc.errno or 0)


def _stage(
    path: str,
    flags: int,
    cmd: str,
    env: Mapping[str, str],
    pipe_end: int,
    file_is_input: bool,
) -> Union[subprocess.Popen, int]:
    try:
        fd = _open_file(path, flags)
        try:
            if file_is_input:
                return _start(cmd, env, fd, pipe_end)
            return _start(cmd, env, pipe_end, fd)
        finally:
            os.close(fd)
    except PipexError as exc:
        _report(exc.message)
        return exc.exit_code


def _wait(stage: Union[subprocess.Popen, int]) -> int:
    if isinstance(stage, int):
        return stage
    code = stage.wait()
    return code if code >= 0 else _FAILURE


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed ``infile`` through ``cmd1`` into ``cmd2``, writing ``outfile``.

    Returns the exit status of the second command; a stage that fails to
    start reports its error on stderr and counts as exited with its code.
    """
    environment = os.environ if env is None else env
    read_end, write_end = os.pipe()
    try:
        first = _stage(
            infile, os.O_RDONLY, cmd1, environment, write_end, file_is_input=True
        )
    finally:
        os.close(write_end)
    try:
        second = _stage(
            outfile,
            os.O_CREAT | os.O_WRONLY | os.O_TRUNC,
            cmd2,
            environment,
            read_end,
            file_is_input=False,
        )
    finally:
        os.close(read_end)
    _wait(first)
    return _wait(second)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: ``pipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        _report(_USAGE)
        return _FAILURE
    return run_pipeline(*args)


if __name__ == "__main__":
    sys.exit(main())