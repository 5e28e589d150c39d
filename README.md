# pipex

`pipex` runs two commands joined by a pipe. It reads from an input file and
writes to an output file, so this call:

    pipex infile "grep foo" "wc -l" outfile

does the same as the shell line:

    < infile grep foo | wc -l > outfile

## Installation

    pip install .

## Command line

    pipex file1 cmd1 cmd2 file2

- `file1` is opened for reading and becomes the standard input of `cmd1`.
- `cmd1`'s standard output is piped into `cmd2`'s standard input.
- `file2` is created (mode 0644) or truncated, and receives `cmd2`'s output.

Each command is split on spaces, and empty words are dropped. A command whose
name has no `/` is looked up in the directories listed in `PATH`; the first
entry that exists and is executable is used. A name with a `/` is used as the
path it names, if that path exists.

Both commands are started before either is waited for. If one stage cannot be
started (its file cannot be opened, or its command cannot be found or run),
its error is printed and the other stage still runs.

Anything other than exactly four arguments prints
`Usage: ./pipex file1 cmd1 cmd2 file2` and exits with status 1.

### Exit status

The exit status is that of the second command. The status of the first
command is not reported. When the second stage fails to start, the status
follows the usual shell convention:

| Status | Meaning                                                                   |
|--------|---------------------------------------------------------------------------|
| 0      | the second command succeeded                                              |
| 1      | the output file could not be opened, the command was killed by a signal, or another failure |
| 126    | the command was found but cannot be run: permission denied, a directory, or an empty file |
| 127    | the command was not found, the command string was empty, or `PATH` is not set |

Error messages go to standard error and start with `./pipex: `.

## Library use

```python
from pipex.pipeline import run_pipeline

status = run_pipeline("input.txt", "grep foo", "wc -l", "output.txt")
```

`run_pipeline(infile, cmd1, cmd2, outfile, env=None)` returns the exit status
described above. With `env=None` the current process environment is used and
passed to the commands; otherwise the given mapping is used both for the
`PATH` search and as the commands' environment. `pipex.pipeline.main(argv=None)`
is the command-line entry and returns the status instead of exiting.

Other modules:

- `pipex.resolve.resolve_path(cmd, env)` returns the path to run for a command
  name, using `PATH` from `env`. It raises `CommandNotFoundError` when nothing
  is found.
- `pipex.commands.parse_command(cmd)` splits a command string into its
  arguments and raises `CommandNotFoundError` for an empty one.
  `check_not_directory(cmd_path, cmd_name)` raises `PermissionDeniedError` for
  a path that opens but yields no line (a directory or an empty file).
  `exit_code_for_errno(err)` maps an OS error number to an exit status.
- `pipex.linereader.LineReader(stream, buffer_size=100)` reads a text or binary
  stream one line at a time, newline included, via `read_line()` or iteration.
- `pipex.errors` holds `PipexError`, `CommandNotFoundError` (exit code 127) and
  `PermissionDeniedError` (exit code 126). Each one carries `message` and
  `exit_code`.
- `pipex.textutils` has string and number helpers: `split_words`, `atoi`,
  `atoi_base`, `int_overflows`, `has_duplicates`, `itoa`, `strtrim` and
  `strnstr`.

## Limits

- Exactly two commands are joined; there is no support for longer chains.
- There is no here-document mode and no appending to the output file.
- Commands are split on spaces only: quotes, escapes, globs and variables are
  not interpreted.

## Running the tests

    pip install ".[test]"
    pytest