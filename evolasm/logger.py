"""Coloured console logging."""

from __future__ import annotations

import sys

WHITE = "\033[37m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"


def _log(level: str, color: str, message: str) -> None:
    sys.stdout.write(f"{color}[{level}] {message}{RESET}\n")
    sys.stdout.flush()


def info(message: str) -> None:
    """Print an informational message."""
    _log("INFO", WHITE, message)


def warn(message: str) -> None:
    """Print a warning."""
    _log("WARN", YELLOW, message)


def error(message: str) -> None:
    """Print an error."""
    _log("ERROR", RED, message)