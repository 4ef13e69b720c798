# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Apply normalized machines to a Vagrant configuration object."""

from typing import Any, Dict, List

from boxcase.errors import DispatchError
from boxcase.models.machine import Machine, StageConfig
from boxcase.utils.logging import get_logger
from boxcase.vagrant.config import MachineConfig, SectionConfig

logger = get_logger(__name__)

ANSIBLE_KIND = "ansible"
SIMPLE_GROUPS_OPTION = "simple_groups"
PRIVATE_NETWORK = "private_network"


def simple_groups_to_groups(groups: Any, machine_name: str) -> Dict[str, List[str]]:
    """Turn ``[g1, g2]`` into ``{g1: [machine_name], g2: [machine_name]}``."""
    if not isinstance(groups, list) or not all(isinstance(g, str) for g in groups):
        raise DispatchError(
            f"Machine {machine_name}: '{SIMPLE_GROUPS_OPTION}' must be a list of group names, "
            f"got {groups!r}"
        )
    return {group: [machine_name] for group in groups}


def apply_stage(
    section: SectionConfig,
    stage: StageConfig,
    machine: Machine,
    expand_simple_groups: bool = False,
) -> None:
    """Apply options as setters, then methods as calls, in document order.

    With expand_simple_groups, a `simple_groups` option is applied as `groups`.
    """
    for key, value in stage.options.items():
        if expand_simple_groups and key == SIMPLE_GROUPS_OPTION:
            section.set_option("groups", simple_groups_to_groups(value, machine.name))
        else:
            section.set_option(key, value)
    for method, value in stage.methods.items():
        section.call(method, value)


def configure_machine(vm: MachineConfig, machine: Machine) -> MachineConfig:
    """Configure ``vm`` from a normalized machine.

    Errors raised by the configuration object propagate unchanged.
    """
    vm.box = machine.box
    vm.hostname = machine.host_name
    vm.network(PRIVATE_NETWORK, ip=machine.private_ip)

    for kind, stage in machine.provisioning.items():
        logger.debug(f"{machine.name}: provisioner {kind}")
        apply_stage(vm.provision(kind), stage, machine, expand_simple_groups=kind == ANSIBLE_KIND)

    for kind, stage in machine.providers.items():
        logger.debug(f"{machine.name}: provider {kind}")
        apply_stage(vm.provider(kind), stage, machine)

    return vm
