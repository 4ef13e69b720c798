# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""boxcase CLI package."""

import click

from boxcase import __version__
from boxcase.utils.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="boxcase")
@click.option("--debug", is_flag=True, help="Verbose output (same as BOXCASE_DEBUG=1).")
def cli(debug: bool):
    """boxcase - Build Vagrant machines from YAML test cases.

    \b
    The test case path comes from --test-case or TEST_CASE_CONFIG.
    Machine defaults are read from .test_machine_defaults.yml if present.
    """
    configure_logging(debug=debug, force=True)


def main():
    """Main entry point."""
    cli()


from boxcase.cli.commands import kinds  # noqa: E402,F401
from boxcase.cli.commands import machines  # noqa: E402,F401
from boxcase.cli.commands import render  # noqa: E402,F401
