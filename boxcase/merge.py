# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Recursive defaults merge for machine definitions."""

from typing import Any, Dict, Mapping, Optional

from boxcase.utils.logging import get_logger

logger = get_logger(__name__)


def merge_defaults(
    target: Optional[Mapping[str, Any]],
    defaults: Optional[Mapping[str, Any]],
    _path: str = "",
) -> Dict[str, Any]:
    """Fill keys missing from target with values from defaults.

    Present non-null values in target are never overwritten. Nested
    mappings are merged recursively. When only one side of a key holds a
    mapping, target wins and a warning is logged.

    Neither argument is mutated; untouched nested values may be shared.

    Args:
        target: Mapping to fill (may be None or empty)
        defaults: Mapping of default values (may be None)

    Returns:
        A new dict with the merged result
    """
    if not target:
        return dict(defaults) if defaults else {}

    result = dict(target)
    for key, default_value in (defaults or {}).items():
        key_path = f"{_path}.{key}" if _path else str(key)
        current = result.get(key)

        if isinstance(default_value, Mapping):
            if isinstance(current, Mapping):
                result[key] = merge_defaults(current, default_value, key_path)
            elif current is None:
                # Nothing to keep: take the defaults subtree
                result[key] = dict(default_value)
            else:
                logger.warning(
                    f"Cannot merge defaults into '{key_path}': expected a mapping, "
                    f"got {type(current).__name__}; keeping {current!r}"
                )
        elif current is None:
            result[key] = default_value
        elif isinstance(current, Mapping) and default_value is not None:
            logger.warning(
                f"Cannot merge defaults into '{key_path}': default is "
                f"{type(default_value).__name__}, not a mapping; keeping the machine's value"
            )

    return result
