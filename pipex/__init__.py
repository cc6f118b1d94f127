"""Two commands connected by a pipe between an input and an output file, with small text, memory and list helpers."""

__version__ = "0.1.0"