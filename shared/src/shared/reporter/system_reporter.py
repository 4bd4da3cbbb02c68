"""
System Reporter - Centralized logging with optional log sink.

Provides SystemReporter for file/console logging. A sink callable can be
attached to mirror log lines elsewhere (debug overlay, UI status bar).

Production-ready: Supports stdout logging for container environments.
"""

import logging
import os
import sys
from typing import Callable, Optional

# (level, message, context) -> None
LogSink = Callable[[str, str, str], None]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SystemReporter:
    """
    Logger with verbose filtering and optional sink forwarding.

    Supports both file-based logging (development) and stdout logging
    (production).

    Verbose Levels:
        0 = Critical only (always visible)
        1 = Important messages (default)
        2 = Detailed information
        3 = Debug/verbose
    """

    def __init__(
        self,
        name: str = "system",
        log_dir: Optional[str] = None,
        level: int = logging.INFO,
        verbose: int = 1,
        sink: Optional[LogSink] = None,
        console: bool = True,
    ) -> None:
        """
        Initialize SystemReporter.

        Args:
            name: Logger name (used for filename if log_dir provided)
            log_dir: Directory for log files. If None, logs to stdout only.
                    Relative paths are resolved from the working directory.
            level: Python logging level
            verbose: Verbosity filter (0-3)
            sink: Optional callable receiving (level, message, context)
            console: Attach a stdout handler
        """
        self.name = name
        self.verbose = max(0, min(3, verbose))
        self.sink = sink
        self.log_file: Optional[str] = None

        self._init_logger(name, log_dir, level, console)

    def _init_logger(
        self, name: str, log_dir: Optional[str], level: int, console: bool
    ) -> None:
        """
        Initialize logger with file and/or console handlers.

        Args:
            name: Logger name
            log_dir: Log directory path (None = stdout only)
            level: Python logging level
            console: Attach a stdout handler
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.handlers.clear()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_dir:
            log_dir = os.path.abspath(os.path.expanduser(log_dir))
            os.makedirs(log_dir, exist_ok=True)
            self.log_file = os.path.join(log_dir, f"{name}.log")

            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _forward(self, level: str, message: str, context: str) -> None:
        """Forward log line to sink (fire-and-forget)."""
        if not self.sink:
            return

        try:
            self.sink(level, message, context)
        except Exception as e:
            print(f"⚠ Log sink failed: {e}", file=sys.stderr)

    def set_verbose(self, level: int) -> None:
        """Update verbosity level."""
        self.verbose = max(0, min(3, level))
        self.info(
            f"Verbosity set to {self.verbose}",
            context="SystemReporter",
            verbose_level=0,
        )

    def _should_log(self, verbose_level: int) -> bool:
        """Check if message should be logged."""
        return self.verbose >= verbose_level

    def close(self) -> None:
        """Detach and close all handlers."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # Core logging methods
    def debug(
        self, msg: str, context: str = "system", verbose_level: int = 3
    ) -> None:
        """Log debug message (not forwarded to sink)."""
        if self._should_log(verbose_level):
            self.logger.debug(f"[{context}] {msg}")

    def info(
        self, msg: str, context: str = "system", verbose_level: int = 1
    ) -> None:
        """Log info message and forward to sink."""
        if self._should_log(verbose_level):
            self.logger.info(f"[{context}] {msg}")
            self._forward("info", msg, context)

    def warning(
        self, msg: str, context: str = "system", verbose_level: int = 1
    ) -> None:
        """Log warning message and forward to sink."""
        if self._should_log(verbose_level):
            self.logger.warning(f"[{context}] {msg}")
            self._forward("warning", msg, context)

    def error(
        self, msg: str, context: str = "system", verbose_level: int = 0
    ) -> None:
        """Log error message and forward to sink."""
        if self._should_log(verbose_level):
            self.logger.error(f"[{context}] {msg}")
            self._forward("error", msg, context)

    def critical(
        self, msg: str, context: str = "system", verbose_level: int = 0
    ) -> None:
        """Log critical message and forward to sink."""
        if self._should_log(verbose_level):
            self.logger.critical(f"[{context}] {msg}")
            self._forward("critical", msg, context)
