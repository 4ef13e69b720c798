# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Vagrantfile rendering and validation commands."""

from pathlib import Path
from typing import Optional

import click

from boxcase.builder import load_and_build
from boxcase.cli import cli
from boxcase.cli.helpers import case_options, handle_errors
from boxcase.paths import VAGRANTFILE_NAME
from boxcase.utils.logging import get_logger
from boxcase.vagrant.render import render_vagrantfile

logger = get_logger(__name__)


@cli.command()
@case_options
@click.option(
    "--output",
    "-o",
    default=VAGRANTFILE_NAME,
    show_default=True,
    help="Where to write the Vagrantfile ('-' for stdout).",
)
@handle_errors
def render(test_case_path: Optional[str], defaults_path: str, output: str):
    """Write a Vagrantfile for the test case.

    Examples:
        TEST_CASE_CONFIG=cases/web.yml boxcase render
        boxcase render --test-case cases/web.yml -o -
    """
    machines, config = load_and_build(test_case_path, defaults_path)
    text = render_vagrantfile(config, source=test_case_path)

    if output == "-":
        click.echo(text, nl=False)
        return

    Path(output).write_text(text)
    logger.success(f"Wrote {output} with {len(machines)} machine(s)")


@cli.command()
@case_options
@handle_errors
def check(test_case_path: Optional[str], defaults_path: str):
    """Validate the test case without writing anything."""
    machines, _ = load_and_build(test_case_path, defaults_path)
    for machine in machines:
        logger.info(f"{machine.name}: {machine.private_ip}")
    logger.success(f"Test case OK: {len(machines)} machine(s)")
