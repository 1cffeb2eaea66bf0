"""Centralized logging utilities.

All debugger messages go through the 'trackdbg' logger, prefixed with a tag
naming the emitting component.
"""

import logging
import sys
from typing import Callable, Optional


class Logger:
    """Centralized logger with tag-based logging support.

    Example:
        >>> log = Logger.get_logging_method("DEBUGGER")
        >>> log("Debugger initialized")
        [2024-01-01 12:00:00] [DEBUGGER] Debugger initialized
    """

    _logger: Optional[logging.Logger] = None
    _initialized: bool = False

    @classmethod
    def init(cls, level: int = logging.INFO, console: bool = True) -> None:
        """Initialize the logging system.

        Args:
            level: Logging level (default INFO).
            console: Whether to output to console.
        """
        if cls._initialized:
            return

        cls._logger = logging.getLogger("trackdbg")
        cls._logger.setLevel(level)
        cls._logger.handlers.clear()

        if console:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(level)
            handler.setFormatter(logging.Formatter(
                "[%(asctime)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            cls._logger.addHandler(handler)

        cls._initialized = True

    @classmethod
    def get_logging_method(cls, tag_name: str, level: int = logging.INFO) -> Callable[[str], None]:
        """Get a logging method with a specific tag.

        Args:
            tag_name: Tag to prepend to log messages.
            level: Level the messages are emitted at.

        Returns:
            A callable that logs messages with the specified tag.
        """
        if not cls._initialized:
            cls.init()

        logger = cls._logger

        def log_method(message: str) -> None:
            logger.log(level, f"[{tag_name}] {message}")

        return log_method


def get_logger(name: str = "trackdbg") -> logging.Logger:
    """Get a logger instance, initializing logging on first use."""
    if not Logger._initialized:
        Logger.init()
    return logging.getLogger(name)
