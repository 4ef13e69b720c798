# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Unified logging for boxcase.

This module provides:
1. Centralized logging configuration under the ``boxcase`` logger
2. Debug mode via BOXCASE_DEBUG env var or programmatic flag
3. Log levels via BOXCASE_LOG_LEVEL env var
4. Rich console output on stderr, optional rotating log file

Usage:
    from boxcase.utils.logging import get_logger, configure_logging

    # In CLI entry point:
    configure_logging(debug=debug)

    # In any module:
    logger = get_logger(__name__)
    logger.info("Rendering Vagrantfile")
    logger.warning("Structural mismatch", console_output=True)

Environment Variables:
    BOXCASE_DEBUG=1          Enable debug mode (verbose output)
    BOXCASE_LOG_LEVEL=DEBUG  Set log level (DEBUG, INFO, WARNING, ERROR)
    BOXCASE_LOG_FILE=/path   Also write logs to this file
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

# Global state
_configured = False
_debug_mode = False
_log_file: Optional[Path] = None

# Console output goes to stderr so `render --output -` keeps stdout clean
console = Console(stderr=True)

# Custom log level for success messages
SUCCESS_LEVEL = 25
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")

ROOT_LOGGER_NAME = "boxcase"


def is_debug_mode() -> bool:
    """Check if debug mode is enabled."""
    return _debug_mode or os.environ.get("BOXCASE_DEBUG", "").lower() in ("1", "true", "yes")


def configure_logging(
    debug: bool = False,
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    force: bool = False,
) -> None:
    """Configure the logging system.

    Should be called once at application startup (CLI entry point).

    Args:
        debug: Enable debug mode (verbose output, debug to console)
        log_level: Override log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Write logs to this file as well
        force: Reconfigure even if logging was already set up
    """
    global _configured, _debug_mode, _log_file

    if _configured and not force:
        return

    _debug_mode = debug or is_debug_mode()

    if log_file:
        _log_file = Path(log_file)
    elif os.environ.get("BOXCASE_LOG_FILE"):
        _log_file = Path(os.environ["BOXCASE_LOG_FILE"])

    # Determine log level
    if log_level:
        level_name = log_level.upper()
    else:
        level_name = os.environ.get("BOXCASE_LOG_LEVEL", "DEBUG" if _debug_mode else "INFO").upper()

    level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if _log_file:
        try:
            _log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                _log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            root_logger.addHandler(file_handler)
        except OSError:
            # Can't write log file, continue without it
            _log_file = None

    if not root_logger.handlers:
        # Console output comes from boxcaseLogger, never logging.lastResort
        root_logger.addHandler(logging.NullHandler())

    _configured = True

    root_logger.debug(f"Logging configured: level={level_name}, debug={_debug_mode}")
    if _log_file:
        root_logger.debug(f"Log file: {_log_file}")


class boxcaseLogger:
    """Logging with Rich console output.

    Provides:
    - Standard log levels (debug, info, warning, error)
    - Success level for green checkmark messages
    - Debug output to console when debug mode enabled
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)
        self.console = console

    def debug(self, message: str, console_output: bool = False) -> None:
        """Log debug message.

        Debug only reaches the console with console_output=True or
        BOXCASE_DEBUG enabled.
        """
        self.logger.debug(message)
        if console_output or is_debug_mode():
            self.console.print(f"[dim][DEBUG] {escape(message)}[/dim]")

    def info(self, message: str, console_output: bool = True) -> None:
        self.logger.info(message)
        if console_output:
            self.console.print(f"[blue]{escape(message)}[/blue]")

    def success(self, message: str, console_output: bool = True) -> None:
        self.logger.log(SUCCESS_LEVEL, message)
        if console_output:
            self.console.print(f"[green]✓ {escape(message)}[/green]")

    def warning(self, message: str, console_output: bool = True) -> None:
        self.logger.warning(message)
        if console_output:
            self.console.print(f"[yellow]⚠ {escape(message)}[/yellow]")

    def error(
        self,
        message: str,
        exc: Optional[Exception] = None,
        console_output: bool = True,
    ) -> None:
        """Log error message (red output).

        Args:
            message: Error message
            exc: Optional exception to include in log
            console_output: Output to console
        """
        if exc:
            self.logger.error(f"{message}: {exc}", exc_info=exc)
            error_msg = f"{message}: {exc}"
        else:
            self.logger.error(message)
            error_msg = message

        if console_output:
            self.console.print(f"[red]✗ {escape(error_msg)}[/red]")


def get_logger(name: str) -> boxcaseLogger:
    """Get or create a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        boxcaseLogger instance
    """
    if not _configured:
        configure_logging()

    # Ensure name is under boxcase namespace
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return boxcaseLogger(name)
