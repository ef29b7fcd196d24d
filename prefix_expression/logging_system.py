"""
Logging System for the Prefix Expression Parser

Parser output is off by default apart from warnings. Raise the level to see
one summary line per successful parse (DETAILED) or the reason every
rejected input failed (VERBOSE).
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime

LOGGER_NAME = 'prefix_expression'


class LogLevel(Enum):
    """Verbosity levels, each one including everything below it"""
    SILENT = 0      # Nothing at all
    MINIMAL = 1     # Warnings
    DETAILED = 2    # Info and one line per successful parse
    VERBOSE = 3     # Rejected inputs with their ParseError


class ParserLogger:
    """
    Level-gated wrapper around the package's stdlib logger
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(logging.DEBUG)
        # Reconfiguring replaces whatever an earlier ParserLogger attached
        self.close()

        self._formatter = logging.Formatter('%(asctime)s [%(name)s] %(levelname)s: %(message)s',
                                            datefmt='%H:%M:%S')
        if log_level is not LogLevel.SILENT:
            self._attach(logging.StreamHandler(sys.stdout))

        self.log_file_path = None
        if log_to_file:
            self.log_file_path = log_file_path or f"parser_{datetime.now():%Y%m%d_%H%M%S}.log"
            self._attach(logging.FileHandler(self.log_file_path))

    def _attach(self, handler: logging.Handler):
        handler.setFormatter(self._formatter)
        self.logger.addHandler(handler)

    def enabled(self, level: LogLevel) -> bool:
        return self.log_level.value >= level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.DETAILED):
        if self.enabled(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        if self.enabled(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        if self.enabled(LogLevel.VERBOSE):
            self.logger.debug(message)

    def parse_summary(self, text: str, expression):
        """One line per accepted input: source, canonical prefix form and node count"""
        if self.enabled(LogLevel.DETAILED):
            self.logger.info(f"Parsed {text!r} -> {expression.prefix()} ({expression.size()} nodes)")

    def close(self):
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()


_global_logger: Optional[ParserLogger] = None


def get_logger() -> ParserLogger:
    global _global_logger
    if _global_logger is None:
        _global_logger = ParserLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Change the level of the shared logger, creating it on first use"""
    if _global_logger is None:
        configure_logging(level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ParserLogger:
    """Replace the shared logger"""
    global _global_logger
    _global_logger = ParserLogger(log_level, log_to_file, log_file_path)
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.DETAILED):
    get_logger().info(message, level)


def log_warning(message: str):
    get_logger().warning(message)


def log_debug(message: str):
    get_logger().debug(message)


def log_parse_summary(text: str, expression):
    get_logger().parse_summary(text, expression)
