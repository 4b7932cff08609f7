"""Logging utilities with elapsed-time stamps."""

from __future__ import annotations
import sys
import time
from typing import Optional

from .config import LOG_ENABLED


class Logger:
    """Library logger with timestamps, silent until enabled."""

    def __init__(self, enabled: bool = LOG_ENABLED):
        self._start_time: float = time.perf_counter()
        self.enabled: bool = enabled

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def log(self, msg: str) -> None:
        """Log a message with timestamp."""
        if not self.enabled:
            return
        line = f"[{self.elapsed:7.3f}s] {msg}\n"
        try:
            sys.stdout.write(line)
            sys.stdout.flush()
        except (OSError, ValueError):
            try:
                sys.stderr.write(line)
                sys.stderr.flush()
            except (OSError, ValueError):
                pass

    def __call__(self, msg: str) -> None:
        """Shorthand for log()."""
        self.log(msg)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)


def set_enabled(enabled: bool) -> None:
    """Turn global logging on or off."""
    get_logger().enabled = enabled


def is_enabled() -> bool:
    return get_logger().enabled
