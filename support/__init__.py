# support/__init__.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Logging and visualization support

from .logger import (
    LogLevel,
    PropcalcLogger,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    "LogLevel",
    "PropcalcLogger",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
