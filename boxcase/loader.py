# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Loading the test case and machine defaults YAML files."""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type, Union

import yaml

from boxcase.errors import BoxcaseError, ConfigFileError, MachineDefaultsError
from boxcase.utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def load_yaml_mapping(
    path: PathLike,
    error_cls: Type[BoxcaseError],
    label: str,
    allow_empty: bool = False,
) -> Dict[str, Any]:
    """Parse a YAML file that must contain a single mapping.

    Args:
        path: File to read
        error_cls: Error raised for I/O, syntax and structure problems
        label: Human name of the file used in messages
        allow_empty: Treat an empty document as an empty mapping

    Returns:
        The parsed mapping
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise error_cls(f"Syntax error in {label} {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise error_cls(f"Invalid encoding in {label} {path}: {e}") from e
    except OSError as e:
        raise error_cls(f"Cannot read {label} {path}: {e}") from e

    if data is None and allow_empty:
        return {}
    if not isinstance(data, Mapping):
        raise error_cls(
            f"Invalid file structure in {label} {path}: expected a mapping, "
            f"got {type(data).__name__}"
        )

    logger.debug(f"Loaded {label} from {path}")
    return dict(data)


def load_test_case(path: Optional[PathLike]) -> Dict[str, Any]:
    """Load the test case file.

    Raises:
        ConfigFileError: path unset, file missing, syntax error, or not a mapping
    """
    if not path:
        raise ConfigFileError("Missing or invalid config file: no test case path given")
    if not Path(path).is_file():
        raise ConfigFileError(f"Missing or invalid config file: {path} does not exist")
    return load_yaml_mapping(path, ConfigFileError, "test case")


def load_machine_defaults(path: Optional[PathLike]) -> Dict[str, Any]:
    """Load the machine defaults file.

    A missing or empty file yields no defaults.

    Raises:
        MachineDefaultsError: file present but unreadable, malformed, or not a mapping
    """
    if not path or not Path(path).exists():
        logger.debug(f"No machine defaults at {path}")
        return {}
    return load_yaml_mapping(path, MachineDefaultsError, "machine defaults", allow_empty=True)


def machines_from_test_case(test_case: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Return the machine list of a test case.

    A document without a ``machines`` key describes a single machine.
    """
    if "machines" not in test_case:
        return [dict(test_case)]

    machines = test_case["machines"]
    if not isinstance(machines, list):
        raise ConfigFileError(
            f"Invalid file structure: 'machines' must be a list, got {type(machines).__name__}"
        )
    for index, machine in enumerate(machines):
        if not isinstance(machine, Mapping):
            raise ConfigFileError(
                f"Invalid file structure: machines[{index}] must be a mapping, "
                f"got {type(machine).__name__}"
            )
    return [dict(m) for m in machines]
