# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Machine normalization: defaults, required fields and fallback names."""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from boxcase.errors import ConfigError
from boxcase.merge import merge_defaults
from boxcase.models.machine import Machine
from boxcase.utils.logging import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("private_ip",)
NAME_PREFIX = "test-machine"


def default_machine_name(index: int) -> str:
    """Name given to the machine at ``index`` when it has none."""
    return f"{NAME_PREFIX}{index}"


def normalize_machine(
    machine: Optional[Mapping[str, Any]],
    index: int,
    defaults: Optional[Mapping[str, Any]] = None,
) -> Machine:
    """Merge a machine with defaults and fill in its name and host name.

    Args:
        machine: Raw machine mapping from the test case
        index: Zero-based position of the machine in the test case
        defaults: Machine defaults mapping

    Returns:
        The validated Machine

    Raises:
        ConfigError: A required field is missing or the machine is malformed
    """
    merged: Dict[str, Any] = dict(merge_defaults(machine, defaults))

    for field in REQUIRED_FIELDS:
        if merged.get(field) is None:
            label = merged.get("name") or f"machines[{index}]"
            raise ConfigError(
                f"Machine {label}: missing required field '{field}'",
                hint=f"Add '{field}' to the machine or to the machine defaults.",
            )

    if not merged.get("name"):
        merged["name"] = default_machine_name(index)
    if not merged.get("host_name"):
        merged["host_name"] = merged["name"]

    try:
        normalized = Machine.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Machine {merged['name']}: invalid definition\n{e}") from e

    logger.debug(f"Normalized machine {normalized.name} ({normalized.private_ip})")
    return normalized


def normalize_machines(
    machines: Sequence[Mapping[str, Any]],
    defaults: Optional[Mapping[str, Any]] = None,
) -> List[Machine]:
    """Normalize machines in document order, failing on the first bad one."""
    return [normalize_machine(machine, index, defaults) for index, machine in enumerate(machines)]
