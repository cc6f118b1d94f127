"""Locating and preparing the commands of a pipeline."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from pipex.text import split


class PipexError(Exception):
    """Raised when a step of the pipeline cannot be set up."""


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def find_path(cmd: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the first existing "<dir>/<cmd>" over the PATH directories.

    Only existence is checked, not the permission to execute. Empty PATH
    entries are skipped. Returns None when no directory holds the command;
    raises PipexError when the environment has no PATH at all.
    """
    search = _environment(env).get("PATH")
    if search is None:
        raise PipexError("PATH is not set")
    for directory in split(search, ":"):
        candidate = f"{directory}/{cmd}"
        if os.path.exists(candidate):
            return candidate
    return None


def parse_command(command: str) -> list[str]:
    """Split a command line on spaces into its arguments, dropping empty ones."""
    words = split(command, " ")
    if not words:
        raise PipexError(f"empty command: {command!r}")
    return words


def resolve(
    command: str, env: Optional[Mapping[str, str]] = None
) -> tuple[str, list[str]]:
    """Return the program path and argument list for a command line."""
    args = parse_command(command)
    path = find_path(args[0], env)
    if path is None:
        raise PipexError(f"command not found: {args[0]}")
    return path, args