# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Show the normalized machines of a test case."""

from typing import Optional

from rich.table import Table

from boxcase.builder import load_and_build
from boxcase.cli import cli
from boxcase.cli.helpers import case_options, console, handle_errors


@cli.command()
@case_options
@handle_errors
def machines(test_case_path: Optional[str], defaults_path: str):
    """List machines after defaults and fallback names are applied."""
    normalized, _ = load_and_build(test_case_path, defaults_path)

    table = Table(title="Machines")
    table.add_column("Name", style="cyan")
    table.add_column("Hostname", style="magenta")
    table.add_column("Private IP", style="green")
    table.add_column("Box", style="blue")
    table.add_column("Provisioners", style="yellow")
    table.add_column("Providers", style="yellow")

    for machine in normalized:
        table.add_row(
            machine.name,
            machine.host_name,
            machine.private_ip,
            machine.box or "-",
            ", ".join(machine.provisioner_kinds) or "-",
            ", ".join(machine.provider_kinds) or "-",
        )

    console.print(table)
