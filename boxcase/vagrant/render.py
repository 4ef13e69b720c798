# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Render a VagrantConfig as a Vagrantfile."""

import math
import re
from typing import Any, List, Mapping, Optional

from boxcase import __version__
from boxcase.paths import VAGRANT_API_VERSION
from boxcase.vagrant.config import MachineConfig, SectionConfig, VagrantConfig

INDENT = "  "

# ":id" style strings become Ruby symbols, as Ruby's YAML loader produces
SYMBOL_PATTERN = re.compile(r"^:[A-Za-z_][A-Za-z0-9_]*[?!]?$")
IDENTIFIER_PATTERN = re.compile(r"[^a-z0-9_]+")
# "#" starts interpolation before these in double-quoted strings
INTERPOLATION_PATTERN = re.compile(r"#(?=[{@$])")


def ruby_string(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    escaped = INTERPOLATION_PATTERN.sub(r"\\#", escaped)
    return f'"{escaped}"'


def ruby_literal(value: Any) -> str:
    """Render a YAML-loaded value as a Ruby literal."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "Float::NAN"
        if math.isinf(value):
            return "Float::INFINITY" if value > 0 else "-Float::INFINITY"
        return repr(value)
    if isinstance(value, int):
        return repr(value)
    if isinstance(value, str):
        if SYMBOL_PATTERN.match(value):
            return value
        return ruby_string(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(ruby_literal(v) for v in value) + "]"
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        items = ", ".join(f"{ruby_literal(str(k))} => {ruby_literal(v)}" for k, v in value.items())
        return "{" + items + "}"
    # Dates and other YAML scalars
    return ruby_string(str(value))


def block_variable(kind: str) -> str:
    """Ruby block variable name for a provisioner/provider kind."""
    name = IDENTIFIER_PATTERN.sub("_", kind.lower()).strip("_")
    if not name or name[0].isdigit():
        name = f"cfg_{name}"
    return name


def _render_section(keyword: str, section: SectionConfig, depth: int) -> List[str]:
    pad = INDENT * depth
    var = block_variable(section.kind)
    lines = [f"{pad}machine.vm.{keyword} {ruby_string(section.kind)} do |{var}|"]
    for name, value in section.options.items():
        lines.append(f"{pad}{INDENT}{var}.{name} = {ruby_literal(value)}")
    for call in section.calls:
        args = ", ".join(ruby_literal(arg) for arg in call.args)
        suffix = f"({args})" if call.args else ""
        lines.append(f"{pad}{INDENT}{var}.{call.name}{suffix}")
    lines.append(f"{pad}end")
    return lines


def render_machine(machine: MachineConfig, depth: int = 1) -> List[str]:
    """Render one ``config.vm.define`` block as a list of lines."""
    pad = INDENT * depth
    inner = INDENT * (depth + 1)
    lines = [f"{pad}config.vm.define {ruby_string(machine.name)} do |machine|"]

    if machine.box is not None:
        lines.append(f"{inner}machine.vm.box = {ruby_string(machine.box)}")
    if machine.hostname is not None:
        lines.append(f"{inner}machine.vm.hostname = {ruby_string(machine.hostname)}")
    for network in machine.networks:
        args = [ruby_string(network.kind)]
        args.extend(f"{key}: {ruby_literal(value)}" for key, value in network.options.items())
        lines.append(f"{inner}machine.vm.network {', '.join(args)}")

    for section in machine.provisioners.values():
        lines.extend(_render_section("provision", section, depth + 1))
    for section in machine.providers.values():
        lines.extend(_render_section("provider", section, depth + 1))

    lines.append(f"{pad}end")
    return lines


def render_vagrantfile(config: VagrantConfig, source: Optional[str] = None) -> str:
    """Render the whole configuration as Vagrantfile text.

    Args:
        config: Configuration built by boxcase.builder
        source: Test case path noted in the header comment

    Returns:
        Vagrantfile contents ending with a newline
    """
    lines = [
        "# -*- mode: ruby -*-",
        "# vi: set ft=ruby :",
        f"# Generated by boxcase {__version__}" + (f" from {source}" if source else ""),
        "# Do not edit: regenerate with `boxcase render`.",
        "",
        f'Vagrant.configure("{VAGRANT_API_VERSION}") do |config|',
    ]
    for index, machine in enumerate(config.machines):
        if index:
            lines.append("")
        lines.extend(render_machine(machine))
    lines.append("end")
    return "\n".join(lines) + "\n"
