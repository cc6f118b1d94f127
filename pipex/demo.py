"""A small demonstration of passing a message through a pipe."""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

MESSAGE = b"Hello parent!"
EXAMPLE_NAME = "example.txt"


@dataclass(frozen=True)
class DemoResult:
    """What the demonstration observed."""

    file_deleted: bool
    message: str

    def lines(self) -> list[str]:
        """The report lines, in the order they are printed."""
        status = "File successfully deleted" if self.file_deleted else "Error deleting file"
        return [status, f"Message from child: '{self.message}'"]


def _send(write_fd: int) -> None:
    try:
        view = memoryview(MESSAGE)
        while view:
            view = view[os.write(write_fd, view):]
    finally:
        os.close(write_fd)


def _receive(read_fd: int, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = os.read(read_fd, size - len(chunks))
        if not chunk:
            break
        chunks.extend(chunk)
    return bytes(chunks)


def run_demo(directory: Optional[Union[str, os.PathLike]] = None) -> DemoResult:
    """Send a message from a writer through a pipe while creating and deleting a file.

    The scratch file is created in directory (the current one by default).
    An OSError is raised when it cannot be created.
    """
    base = Path.cwd() if directory is None else Path(directory)
    read_fd, write_fd = os.pipe()
    writer = threading.Thread(target=_send, args=(write_fd,))
    writer.start()
    try:
        example = base / EXAMPLE_NAME
        os.close(os.open(example, os.O_CREAT | os.O_WRONLY, 0o644))
        try:
            os.unlink(example)
            deleted = True
        except OSError:
            deleted = False
        received = _receive(read_fd, len(MESSAGE))
    finally:
        writer.join()
        os.close(read_fd)
    return DemoResult(deleted, received.decode(errors="replace"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration; an optional argument names the scratch directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    directory = args[0] if args else None
    try:
        result = run_demo(directory)
    except OSError as exc:
        print(f"open: {exc.strerror or exc}", file=sys.stderr)
        return 1
    for line in result.lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())