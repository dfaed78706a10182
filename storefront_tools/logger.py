"""
================================================================================
Logging Setup
================================================================================

Loguru configuration shared by every part of the framework.

Exports:
    - init_logger: configure the console (and optional file) sink once
    - TestLogger: per-test logger handle passed explicitly to clients and pages

A TestLogger is a bound loguru logger carrying test class, browser, test
method and step. Each root TestLogger owns a file sink under
logs/<TestClass>/ that only receives its own records, so loggers of tests
running side by side never interleave.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union
from uuid import uuid4

from loguru import logger

from .config import ConfigLoader


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

TEST_LOG_FORMAT = (
    "[{time:YYYY-MM-DD HH:mm:ss} {level: <8}] "
    "[{extra[test_class]}] [{extra[browser]}] "
    "[{extra[test_method]}] [{extra[step]}] {message}"
)

SEPARATOR = "=" * 63
THIN_SEPARATOR = "-" * 63

_logger_initialized = False


def init_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Initializes the loguru console sink with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        log_file: Optional file path to write all logs to.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    config = ConfigLoader()
    level = (level or config.get("logging.level", "INFO")).upper()

    logger.remove()
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=True,
    )

    log_file = log_file or config.get("logging.file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=CONSOLE_FORMAT,
            level=level,
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


class TestLogger:
    """
    Per-test logger handle.

    Usage:
        >>> class_logger = TestLogger("ProductApiTests")
        >>> case_logger = class_logger.for_test_method("test_create_product")
        >>> case_logger.info("Creating product {}", payload)
        >>> case_logger.end_test_method("test_create_product", passed=True)
        >>> class_logger.close()

    Derived loggers (for_test_method, for_step, for_context, for_browser)
    share the file sink of their root; only the root closes it.
    """

    __test__ = False

    def __init__(
        self,
        test_class: str,
        browser: Optional[str] = None,
        write_to_file: bool = True,
        log_dir: Optional[Union[str, Path]] = None,
        level: str = "DEBUG",
    ) -> None:
        self.test_class = test_class
        self.log_file: Optional[Path] = None
        self._log_id = uuid4().hex
        self._sink_id: Optional[int] = None
        self._owns_sink = True
        self._closed = False
        self._logger = logger.bind(
            log_id=self._log_id,
            test_class=test_class,
            browser=browser or "N/A",
            test_method="ClassSetup",
            step="Initial",
        )

        if write_to_file:
            self._add_file_sink(log_dir, level)

    def _add_file_sink(self, log_dir: Optional[Union[str, Path]], level: str) -> None:
        base_dir = Path(log_dir or ConfigLoader().get("logging.dir", "logs"))
        class_dir = base_dir / self.test_class
        class_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = class_dir / f"{self.test_class}_{timestamp}.log"

        log_id = self._log_id
        self._sink_id = logger.add(
            str(self.log_file),
            format=TEST_LOG_FORMAT,
            level=level,
            encoding="utf-8",
            filter=lambda record: record["extra"].get("log_id") == log_id,
        )

    def _derive(self, **extra: Any) -> "TestLogger":
        child = object.__new__(TestLogger)
        child.test_class = self.test_class
        child.log_file = self.log_file
        child._log_id = self._log_id
        child._sink_id = self._sink_id
        child._owns_sink = False
        child._closed = False
        child._logger = self._logger.bind(**extra)
        return child

    # =========================================================================
    # Context
    # =========================================================================

    def for_test_method(self, test_method: str) -> "TestLogger":
        """Log a start banner and return a logger bound to the test method."""
        self._logger.info("")
        self._logger.info(SEPARATOR)
        self._logger.info(f"STARTING TEST: {test_method}")
        self._logger.info(
            f"Test Started At: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}"
        )
        self._logger.info(SEPARATOR)
        return self._derive(test_method=test_method)

    def for_step(self, step: str) -> "TestLogger":
        return self._derive(step=step)

    def for_browser(self, browser: str) -> "TestLogger":
        return self._derive(browser=browser)

    def for_context(self, **properties: Any) -> "TestLogger":
        return self._derive(**properties)

    def end_test_method(self, test_method: str, passed: bool = True) -> None:
        """Log an end banner with the test result."""
        self._logger.info(THIN_SEPARATOR)
        self._logger.info(f"TEST COMPLETED: {test_method}")
        self._logger.info(f"Test Result: {'PASSED' if passed else 'FAILED'}")
        self._logger.info(
            f"Test Ended At: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}"
        )
        self._logger.info(THIN_SEPARATOR)

    # =========================================================================
    # Logging
    # =========================================================================

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.opt(depth=1).debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.opt(depth=1).info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.opt(depth=1).warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.opt(depth=1).error(message, *args, **kwargs)

    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log at ERROR level with the active exception traceback."""
        self._logger.opt(depth=1, exception=True).error(message, *args, **kwargs)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.opt(depth=1).critical(message, *args, **kwargs)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Remove the file sink owned by this logger. Safe to call twice."""
        if self._closed:
            return
        if self._owns_sink and self._sink_id is not None:
            logger.remove(self._sink_id)
        self._closed = True

    def __enter__(self) -> "TestLogger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "CONSOLE_FORMAT",
    "TEST_LOG_FORMAT",
    "TestLogger",
    "init_logger",
]
