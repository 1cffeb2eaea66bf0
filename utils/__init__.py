"""Shared utilities module.

This module provides common utilities used across the debugger:
- Logger: Centralized logging utilities
"""

from .logger import Logger, get_logger

__all__ = [
    "Logger",
    "get_logger",
]
