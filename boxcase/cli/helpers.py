# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Shared helpers for the boxcase CLI."""

import functools
import sys
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from boxcase.errors import BoxcaseError, ConfigError, ConfigFileError, DispatchError, MachineDefaultsError
from boxcase.paths import MACHINE_DEFAULTS_FILENAME, TEST_CASE_ENV
from boxcase.utils.logging import get_logger

logger = get_logger(__name__)

console = Console()
_err_console = Console(stderr=True)

ERROR_TITLES = (
    (ConfigFileError, "Test Case Error"),
    (MachineDefaultsError, "Machine Defaults Error"),
    (ConfigError, "Machine Error"),
    (DispatchError, "Configuration Error"),
)


def show_error_panel(title: str, message: str, hint: str = None) -> None:
    """Display a formatted error panel.

    Args:
        title: Panel title (shown in red)
        message: Main error message
        hint: Optional hint text (shown with blue "Hint:" prefix)
    """
    content = escape(message)
    if hint:
        content += f"\n\n[blue]Hint:[/blue] {escape(hint)}"
    _err_console.print(Panel(content, title=f"[red]{title}[/red]", border_style="red"))


def handle_errors(func: Callable) -> Callable:
    """Decorator that wraps CLI commands with standard error handling.

    BoxcaseError subclasses are shown in a titled panel with their hint;
    click exceptions pass through; anything else gets a generic panel.
    All failures exit with code 1.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except click.ClickException:
            raise
        except BoxcaseError as exc:
            title = next((t for cls, t in ERROR_TITLES if isinstance(exc, cls)), "Error")
            logger.error(title, exc=exc, console_output=False)
            show_error_panel(title, str(exc), exc.hint)
            sys.exit(1)
        except Exception as exc:
            logger.error("Unexpected error", exc=exc, console_output=False)
            show_error_panel("Error", str(exc))
            sys.exit(1)

    return wrapper


def case_options(func: Callable) -> Callable:
    """Add --test-case and --defaults options to a command."""
    func = click.option(
        "--defaults",
        "defaults_path",
        type=click.Path(dir_okay=False),
        default=MACHINE_DEFAULTS_FILENAME,
        show_default=True,
        help="Machine defaults YAML (optional file).",
    )(func)
    func = click.option(
        "--test-case",
        "test_case_path",
        envvar=TEST_CASE_ENV,
        type=click.Path(dir_okay=False),
        default=None,
        help=f"Test case YAML [env: {TEST_CASE_ENV}].",
    )(func)
    return func
