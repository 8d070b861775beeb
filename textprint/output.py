"""Writing text to an output stream."""

from __future__ import annotations

import sys
from typing import TextIO


def print_text(text: str, out: TextIO | None = None) -> None:
    """Write ``text`` to ``out`` as is, with no newline added.

    When ``out`` is omitted the text goes to standard output.
    """
    stream = sys.stdout if out is None else out
    stream.write(text)