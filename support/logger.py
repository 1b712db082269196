# support/logger.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Logging utility for formula parsing and evaluation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, Sequence


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class PropcalcLogger:
    """Centralized logger for formula processing with structured output."""

    def __init__(self, name: str = "propcalc", level: LogLevel = LogLevel.INFO):
        """Initialize the Propcalc logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(PropcalcFormatter())

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

    # Specialized methods for formula processing events
    def formula_parsed(self, source: str, canonical: str, propositions: Sequence[str]):
        """Log a successfully parsed formula."""
        self.info(f"Formula: {source.strip()}")
        self.info(f"Parsed as: {canonical}")
        self.info(f"Propositions: {', '.join(propositions)}")

    def table_built(self, row_count: int, proposition_count: int):
        """Log truth table construction."""
        self.debug(
            f"Truth table built: {row_count} rows over {proposition_count} propositions"
        )

    def classification_result(self, classification: str, satisfiable: bool):
        """Log semantic classification of a formula."""
        self.info(f"\n>>> CLASSIFICATION: {classification} <<<")
        self.info(f"Satisfiable: {'yes' if satisfiable else 'no'}")

    def equivalence_result(self, left: str, right: str, equivalent: bool):
        """Log the outcome of an equivalence check."""
        relation = "≡" if equivalent else "≢"
        self.info(f"\n>>> EQUIVALENCE: {left} {relation} {right} <<<")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class PropcalcFormatter(logging.Formatter):
    """Custom formatter for Propcalc logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[PropcalcLogger] = None


def get_logger(name: str = "propcalc") -> PropcalcLogger:
    """Get or create the global Propcalc logger instance.

    Args:
        name: Logger name (default: "propcalc")

    Returns:
        PropcalcLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = PropcalcLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(debug: bool = False):
    """Configure logging based on command line flags.

    Results are reported at INFO level, so INFO stays enabled unless
    debug output is requested.

    Args:
        debug: Enable DEBUG level output
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    else:
        set_log_level(LogLevel.INFO)
