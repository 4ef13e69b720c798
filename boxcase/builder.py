# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Build a VagrantConfig from a test case and machine defaults."""

from typing import Any, List, Mapping, Optional, Sequence, Tuple

from boxcase.dispatch import configure_machine
from boxcase.loader import PathLike, load_machine_defaults, load_test_case, machines_from_test_case
from boxcase.models.machine import Machine
from boxcase.normalize import normalize_machines
from boxcase.utils.logging import get_logger
from boxcase.vagrant.config import VagrantConfig

logger = get_logger(__name__)


def build_machines(
    test_case: Mapping[str, Any],
    machine_defaults: Optional[Mapping[str, Any]] = None,
) -> List[Machine]:
    """Normalize every machine of a test case."""
    return normalize_machines(machines_from_test_case(test_case), machine_defaults)


def configure_all(machines: Sequence[Machine]) -> VagrantConfig:
    """Define and configure each machine on a fresh VagrantConfig."""
    config = VagrantConfig()
    for machine in machines:
        configure_machine(config.define(machine.name), machine)
    logger.debug(f"Configured {len(config)} machine(s)")
    return config


def build_config(
    test_case: Mapping[str, Any],
    machine_defaults: Optional[Mapping[str, Any]] = None,
) -> VagrantConfig:
    """Build the Vagrant configuration for a parsed test case.

    All machines are normalized before any of them is dispatched, so an
    invalid machine stops the run before the configuration is touched.
    """
    return configure_all(build_machines(test_case, machine_defaults))


def load_and_build(
    test_case_path: Optional[PathLike],
    defaults_path: Optional[PathLike],
) -> Tuple[List[Machine], VagrantConfig]:
    """Load machine defaults, then the test case, then build.

    Returns:
        (normalized machines, configuration)
    """
    machine_defaults = load_machine_defaults(defaults_path)
    test_case = load_test_case(test_case_path)
    machines = build_machines(test_case, machine_defaults)
    return machines, configure_all(machines)
