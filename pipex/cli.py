"""Run "infile cmd1 | cmd2 > outfile" as a two-stage pipeline."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import Optional

from pipex.command import PipexError, resolve


def _describe(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def _report(exc: Exception) -> None:
    print(f"Error: {_describe(exc)}", file=sys.stderr)


def _exit_status(code: int) -> int:
    return 128 - code if code < 0 else code


def _start_first(
    infile: str, cmd1: str, env: dict[str, str], write_fd: int
) -> subprocess.Popen:
    in_fd = os.open(infile, os.O_RDONLY)
    try:
        path, args = resolve(cmd1, env)
        return subprocess.Popen(
            args, executable=path, stdin=in_fd, stdout=write_fd, env=env
        )
    finally:
        os.close(in_fd)


def _start_second(
    cmd2: str, outfile: str, env: dict[str, str], read_fd: int
) -> subprocess.Popen:
    try:
        out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    except OSError as exc:
        raise PipexError(_describe(exc)) from exc
    try:
        path, args = resolve(cmd2, env)
        return subprocess.Popen(
            args, executable=path, stdin=read_fd, stdout=out_fd, env=env
        )
    except OSError as exc:
        raise PipexError(_describe(exc)) from exc
    finally:
        os.close(out_fd)


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed infile through cmd1 and cmd2, writing the result to outfile.

    A failure of the first stage (unreadable infile, unknown command) is
    reported on stderr and the second stage then reads empty input. A failure
    of the second stage raises PipexError. Returns the exit status of cmd2.
    """
    environment = dict(os.environ if env is None else env)
    read_fd, write_fd = os.pipe()
    first: Optional[subprocess.Popen] = None
    try:
        try:
            first = _start_first(infile, cmd1, environment, write_fd)
        except (OSError, PipexError) as exc:
            _report(exc)
    finally:
        os.close(write_fd)
    try:
        second = _start_second(cmd2, outfile, environment, read_fd)
    finally:
        os.close(read_fd)
        if first is not None:
            first.wait()
    return _exit_status(second.wait())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: pipex infile cmd1 cmd2 outfile."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write("Error")
        return 0
    infile, cmd1, cmd2, outfile = args
    try:
        return run_pipeline(infile, cmd1, cmd2, outfile)
    except PipexError as exc:
        _report(exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())