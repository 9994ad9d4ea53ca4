# utils/logger.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Logging utility for truth-table generation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for truth-table generation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TabulaLogger:
    """Centralized logger for the parser, evaluator and command-line shell."""

    def __init__(self, name: str = "tabula", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        # Diagnostics go to stderr so stdout carries only tables
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TabulaFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for truth-table sessions
    def session_banner(self):
        """Log the interactive usage banner."""
        self.info("Please enter an expression,")
        self.info("! stands for not, & for and, | for or, -> for implies, <-> for iff.")
        self.info("Use lowercase letters as variables. Parentheses can be used as well.")
        self.info("An empty line exits.")

    def formula_rejected(self, source: str, reason: str):
        """Log a formula that could not be tabulated."""
        self.error(f"❌ {source!r}: {reason}")

    def table_summary(self, source: str, rows: int, columns: int, verdict: Optional[str] = None):
        """Log the size (and optional classification) of a generated table."""
        verdict_str = f", {verdict}" if verdict else ""
        self.debug(f"Table for {source!r}: {rows} row(s) x {columns} column(s){verdict_str}")


class TabulaFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        # For DEBUG level, show with level indicator
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TabulaLogger] = None


def get_logger(name: str = "tabula") -> TabulaLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "tabula")

    Returns:
        TabulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TabulaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(quiet: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        quiet: Only report warnings and errors
        debug: Enable debug output (overrides quiet)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif quiet:
        set_log_level(LogLevel.WARNING)
    else:
        set_log_level(LogLevel.INFO)
