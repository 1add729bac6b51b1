"""Colored status lines for the command line."""

import sys
from typing import TextIO

YELLOW = "\033[33m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
BULLET = "•"
CROSS = "✗"


def _supports_color(stream: TextIO) -> bool:
    return hasattr(stream, "isatty") and stream.isatty()


def _emit(symbol: str, color: str, message: str, stream: TextIO) -> None:
    if _supports_color(stream):
        symbol = f"{color}{symbol}{RESET}"
    print(f"{symbol} {message}", file=stream)


def info(message: str, detail: str | None = None) -> None:
    """Print a bulleted status line, with an optional dimmed detail."""
    if detail is not None:
        detail = f"{DIM}{detail}{RESET}" if _supports_color(sys.stdout) else detail
        message = f"{message} {detail}"
    _emit(BULLET, YELLOW, message, sys.stdout)


def error(message: str) -> None:
    """Print an error line to stderr."""
    _emit(CROSS, RED, message, sys.stderr)
