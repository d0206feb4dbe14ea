"""Timestamped, colour-coded console logging."""

from __future__ import annotations

import time
from collections.abc import Sequence

_INFO_COLOUR = "\033[1;34m"
_ERROR_COLOUR = "\033[1;31m"
_WARNING_COLOUR = "\033[1;33m"
_RESET = "\033[0m"


def _emit(colour: str, message: str) -> None:
    print(f"{colour}[{time.ctime()}]: {_RESET}{message}", flush=True)


def log(message: str) -> None:
    """Write an info message with a timestamp to standard output."""
    _emit(_INFO_COLOUR, message)


def log_error(message: str) -> None:
    """Write an error message with a timestamp to standard output."""
    _emit(_ERROR_COLOUR, message)


def log_warning(message: str) -> None:
    """Write a warning message with a timestamp to standard output."""
    _emit(_WARNING_COLOUR, message)


def main(argv: Sequence[str] | None = None) -> int:
    """Show one message of each severity."""
    log("Hello, World!")
    log_error("This is an error message!")
    log_warning("This is a warning message!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())