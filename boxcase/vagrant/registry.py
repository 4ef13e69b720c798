# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Supported provisioner and provider kinds.

Each kind lists the options (typed setters) and methods its configuration
section accepts. Anything not listed here is rejected by the
configuration object with UnsupportedOptionError.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from boxcase.errors import UnsupportedOptionError

STR = (str,)
INT = (int,)
BOOL = (bool,)
LIST = (list,)
DICT = (dict,)


@dataclass(frozen=True)
class OptionSpec:
    """A setter: ``section.<name> = value`` with value of one of ``types``."""

    name: str
    types: Tuple[type, ...]

    def accepts(self, value) -> bool:
        # bool is an int subclass; only accept it where bool is declared
        if isinstance(value, bool) and bool not in self.types:
            return False
        return isinstance(value, self.types)


@dataclass(frozen=True)
class MethodSpec:
    """A method call: ``section.<name>(value)``.

    takes_argument: False for methods called without arguments
    splat: value is a list whose items are passed as separate arguments
    """

    name: str
    takes_argument: bool = True
    splat: bool = False


@dataclass(frozen=True)
class KindSpec:
    """Options and methods accepted by one provisioner or provider kind."""

    kind: str
    options: Dict[str, OptionSpec] = field(default_factory=dict)
    methods: Dict[str, MethodSpec] = field(default_factory=dict)


def _kind(kind: str, options: Iterable[Tuple[str, Tuple[type, ...]]], methods=()) -> KindSpec:
    return KindSpec(
        kind=kind,
        options={name: OptionSpec(name, types) for name, types in options},
        methods={m.name: m for m in methods},
    )


_ANSIBLE_COMMON = [
    ("playbook", STR),
    ("groups", DICT),
    ("host_vars", DICT),
    ("extra_vars", DICT + STR),
    ("inventory_path", STR),
    ("limit", STR + LIST),
    ("verbose", BOOL + STR),
    ("become", BOOL),
    ("become_user", STR),
    ("tags", STR + LIST),
    ("skip_tags", STR + LIST),
    ("start_at_task", STR),
    ("raw_arguments", STR + LIST),
    ("compatibility_mode", STR),
    ("config_file", STR),
    ("galaxy_role_file", STR),
    ("galaxy_roles_path", STR),
    ("galaxy_command", STR),
    ("playbook_command", STR),
    ("vault_password_file", STR),
    ("version", STR),
    ("ask_become_pass", BOOL),
    ("ask_vault_pass", BOOL),
]

PROVISIONERS: Dict[str, KindSpec] = {
    spec.kind: spec
    for spec in (
        _kind(
            "ansible",
            _ANSIBLE_COMMON
            + [
                ("force_remote_user", BOOL),
                ("host_key_checking", BOOL),
                ("raw_ssh_args", LIST),
            ],
        ),
        _kind(
            "ansible_local",
            _ANSIBLE_COMMON
            + [
                ("install", BOOL),
                ("install_mode", STR),
                ("provisioning_path", STR),
                ("tmp_path", STR),
            ],
        ),
        _kind(
            "shell",
            [
                ("inline", STR + LIST),
                ("path", STR),
                ("args", STR + LIST),
                ("env", DICT),
                ("privileged", BOOL),
                ("upload_path", STR),
                ("binary", BOOL),
                ("keep_color", BOOL),
                ("name", STR),
                ("reboot", BOOL),
                ("reset", BOOL),
                ("sensitive", BOOL),
            ],
        ),
        _kind(
            "file",
            [
                ("source", STR),
                ("destination", STR),
            ],
        ),
    )
}

PROVIDERS: Dict[str, KindSpec] = {
    spec.kind: spec
    for spec in (
        _kind(
            "virtualbox",
            [
                ("name", STR),
                ("memory", INT + STR),
                ("cpus", INT),
                ("gui", BOOL),
                ("linked_clone", BOOL),
                ("check_guest_additions", BOOL),
                ("default_nic_type", STR),
            ],
            methods=[MethodSpec("customize")],
        ),
        _kind(
            "libvirt",
            [
                ("memory", INT),
                ("cpus", INT),
                ("driver", STR),
                ("uri", STR),
                ("nested", BOOL),
                ("cpu_mode", STR),
                ("machine_virtual_size", INT),
                ("storage_pool_name", STR),
                ("graphics_type", STR),
                ("management_network_name", STR),
                ("management_network_address", STR),
            ],
            methods=[
                MethodSpec("storage", splat=True),
                MethodSpec("redirdev", splat=True),
                MethodSpec("random", splat=True),
            ],
        ),
        _kind(
            "docker",
            [
                ("image", STR),
                ("build_dir", STR),
                ("name", STR),
                ("ports", LIST),
                ("env", DICT),
                ("volumes", LIST),
                ("cmd", LIST),
                ("create_args", LIST),
                ("has_ssh", BOOL),
                ("remains_running", BOOL),
            ],
        ),
    )
}


def register_provisioner(spec: KindSpec) -> None:
    """Add or replace a provisioner kind."""
    PROVISIONERS[spec.kind] = spec


def register_provider(spec: KindSpec) -> None:
    """Add or replace a provider kind."""
    PROVIDERS[spec.kind] = spec


def get_provisioner(kind: str) -> KindSpec:
    try:
        return PROVISIONERS[kind]
    except KeyError:
        raise UnsupportedOptionError("provisioners", kind, PROVISIONERS) from None


def get_provider(kind: str) -> KindSpec:
    try:
        return PROVIDERS[kind]
    except KeyError:
        raise UnsupportedOptionError("providers", kind, PROVIDERS) from None
