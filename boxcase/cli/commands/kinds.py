# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""List supported provisioner and provider kinds."""

from typing import Dict, Optional

import click
from rich.table import Table

from boxcase.cli import cli
from boxcase.cli.helpers import console, handle_errors
from boxcase.dispatch import ANSIBLE_KIND, SIMPLE_GROUPS_OPTION
from boxcase.vagrant.registry import PROVIDERS, PROVISIONERS, KindSpec


def _kinds_table(title: str, kinds: Dict[str, KindSpec]) -> Table:
    table = Table(title=title)
    table.add_column("Kind", style="cyan")
    table.add_column("Options", style="green")
    table.add_column("Methods", style="yellow")

    for kind, spec in kinds.items():
        options = [
            f"{name} ({'/'.join(t.__name__ for t in option.types)})"
            for name, option in spec.options.items()
        ]
        if kind == ANSIBLE_KIND:
            options.append(f"{SIMPLE_GROUPS_OPTION} (list)")
        table.add_row(kind, "\n".join(options) or "-", ", ".join(spec.methods) or "-")
    return table


@cli.command()
@click.argument("section", required=False, type=click.Choice(["provisioners", "providers"]))
@handle_errors
def kinds(section: Optional[str]):
    """Show the options and methods each kind accepts.

    Pass 'provisioners' or 'providers' to show only one table.
    """
    if section in (None, "provisioners"):
        console.print(_kinds_table("Provisioners", PROVISIONERS))
    if section in (None, "providers"):
        console.print(_kinds_table("Providers", PROVIDERS))
