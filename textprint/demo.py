"""Append every word read from standard input to the file named by LOG_PATH."""

from __future__ import annotations

import os
import sys

from textprint.output import print_text


def main(argv: list[str] | None = None) -> int:
    """Append each input word as its own line to $LOG_PATH; return the exit status."""
    log_path = os.environ.get("LOG_PATH")
    if log_path is None:
        print("undefined environment variable: LOG_PATH", file=sys.stderr)
        return 1

    for line in sys.stdin:
        for word in line.split():
            with open(log_path, "a") as out:
                print_text(word, out)
                out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())