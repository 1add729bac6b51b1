"""Logging configuration for taskboard."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from . import __version__

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    verbose: int = 0, log_file: Path | None = None, state_file: Path | None = None
) -> None:
    """Attach stderr and file handlers to the ``taskboard`` logger.

    Nothing is configured unless ``verbose`` is set or a log file is given.
    ``-v`` logs at INFO, ``-vv`` and above at DEBUG. The startup banner
    records where board state lives so separate runs can be told apart in
    a shared log file.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to append logs to
        state_file: Board state file, or None for the in-memory board
    """
    if verbose == 0 and log_file is None:
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO
    logger = logging.getLogger("taskboard")
    logger.setLevel(level)

    if verbose > 0:
        logger.addHandler(_handler(logging.StreamHandler(sys.stderr), level))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_handler(logging.FileHandler(log_file), level))

    started = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("-" * 60)
    logger.info(
        "taskboard %s started %s | level=%s | state=%s",
        __version__,
        started,
        logging.getLevelName(level),
        state_file or "memory",
    )
