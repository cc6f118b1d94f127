# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file and the second writes to an output file:

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

This behaves much like the shell line:

```
< infile cmd1 args | cmd2 args > outfile
```

## Installation

```
pip install .
```

## Usage

```
pipex input.txt "grep hello" "wc -l" result.txt
```

- The call takes exactly four arguments. With any other count, `Error` is
  written to standard error with no newline, and the exit status is 0.
- Each command is split on spaces. Empty words are dropped and there is no
  quoting. The command name is looked up in the directories listed in `PATH`.
  A candidate only has to exist there; it is not checked for execute
  permission.
- The output file is created with mode `0777`, subject to the umask, or
  truncated if it already exists.
- If the input file cannot be opened, or the first command cannot be found,
  the error is printed to standard error as `Error: <reason>`. The second
  command still runs, and it reads empty input.
- If the output file cannot be opened, or the second command cannot be found,
  the error is printed the same way and the exit status is 1.
- Otherwise the exit status is the exit status of the second command. If the
  second command is killed by signal N, the status is 128 + N.

From Python:

```python
from pipex.cli import run_pipeline

status = run_pipeline("input.txt", "grep hello", "wc -l", "result.txt", env=None)
```

`env` is a mapping passed to both commands and used for the `PATH` lookup.
With `None`, the current environment is used. A failure in the second stage
raises `pipex.command.PipexError`.

The helpers in `pipex.command` are also public:

- `find_path(cmd, env)` returns the first `<dir>/<cmd>` that exists among the
  `PATH` directories, or `None`. It raises `PipexError` if `PATH` is not set.
- `parse_command(command)` splits a command line on spaces into its words. It
  raises `PipexError` for an empty command.
- `resolve(command, env)` returns `(path, args)`. It raises `PipexError` when
  the command cannot be found.

## Pipe demonstration

```
pipex-demo [directory]
```

A writer thread sends the message `Hello parent!` through an OS pipe. While
that happens, the reader creates a scratch file `example.txt` in the given
directory (the current directory by default) and deletes it again. The output
reports whether the deletion worked, followed by the message received:

```
File successfully deleted
Message from child: 'Hello parent!'
```

From Python, `pipex.demo.run_demo(directory)` returns a `DemoResult` with the
fields `file_deleted` and `message`. Its `lines()` method gives the report
lines.

## Toolkit modules

The package also ships small utilities. The pipeline uses `pipex.text.split`.

| Module | Contents |
| --- | --- |
| `pipex.chars` | ASCII class tests (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`) and `to_upper` / `to_lower` |
| `pipex.numbers` | `atoi` (C-style parsing, wraps to 32 bits) and `itoa` (32-bit range only) |
| `pipex.memory` | Byte-buffer operations: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset` |
| `pipex.text` | C-style string routines: `split`, `strchr`, `strrchr`, `strdup`, `striteri`, `strjoin`, `strlcpy`, `strlcat`, `strlen`, `strmapi`, `strncmp`, `strnstr`, `strtrim`, `substr` |
| `pipex.linked` | `LinkedList` and `Node` |

## Limitations

- Only two commands are supported. There is no here-document mode.
- Command arguments cannot contain spaces, because commands are split on
  spaces with no quoting.
- The package has no helpers for writing to raw file descriptors.

## Running the tests

```
pip install .[test]
pytest
```