"""Small usage examples of print_text."""

from __future__ import annotations

import os

from textprint.output import print_text


def hello_stdout() -> None:
    """Write ``hello`` to standard output."""
    print_text("hello")


def hello_file(path: str | os.PathLike[str] = "log.txt") -> None:
    """Write ``hello`` to the file at ``path``, replacing its content."""
    with open(path, "w") as file:
        print_text("hello", file)