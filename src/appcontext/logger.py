"""Logging configuration for appcontext with custom verbosity levels."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Holder writes sit just under WARNING, holder reads just under INFO
CHANGES_LEVEL = 25
CHECKS_LEVEL = 15

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

VERBOSITY_SILENT = 0  # Errors only, re-initialization warnings hidden
VERBOSITY_CHANGES = 1  # Show initialize/reset/override
VERBOSITY_CHECKS = 2  # Also show reads
VERBOSITY_DEBUG = 3  # Also show policy changes and config fallbacks


class ContextLogger(logging.Logger):
    """Logger for holder activity: changes() for writes, checks() for reads."""

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a holder write (initialize, reset, override)."""
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a holder read."""
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> ContextLogger:
    """Return the shared "appcontext" logger, created as a ContextLogger."""
    logging.setLoggerClass(ContextLogger)
    logger = logging.getLogger("appcontext")
    logging.setLoggerClass(logging.Logger)
    assert isinstance(logger, ContextLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the appcontext logger with verbosity level.

    Args:
        verbosity: 0=silent (errors only), 1=changes, 2=checks, 3=debug
        stream: Where records go; sys.stderr when omitted
    """
    logger = get_logger()
    logger.handlers.clear()

    level_map = {
        VERBOSITY_SILENT: logging.ERROR,
        VERBOSITY_CHANGES: CHANGES_LEVEL,
        VERBOSITY_CHECKS: CHECKS_LEVEL,
        VERBOSITY_DEBUG: logging.DEBUG,
    }
    logger.setLevel(level_map.get(verbosity, logging.ERROR))

    output_stream = stream if stream is not None else sys.stderr

    handler = logging.StreamHandler(output_stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and return to errors-only."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)
