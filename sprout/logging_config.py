"""
Logging setup for the sprout package.

Modules log through logging.getLogger(__name__), so everything lands under
the "sprout" logger. setup_logging() attaches a terminal handler to it;
library users who configure logging themselves never need to call it.
"""

from __future__ import annotations
import logging
import sys

logger = logging.getLogger("sprout")


class TerminalFormatter(logging.Formatter):
    """Colored level names for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(level: int = logging.INFO, color: bool = True) -> logging.Logger:
    """
    Configure the package logger.

    Replaces any handlers installed by an earlier call, writes to stderr
    and stops propagation to the root logger.
    """
    pkg_logger = logging.getLogger("sprout")
    pkg_logger.setLevel(level)
    pkg_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    if color:
        handler.setFormatter(TerminalFormatter(fmt=fmt, datefmt="%H:%M:%S"))
    else:
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt="%H:%M:%S"))
    pkg_logger.addHandler(handler)

    pkg_logger.propagate = False
    return pkg_logger
