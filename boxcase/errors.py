# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Exception hierarchy for boxcase.

Every error here is fatal: the CLI's handle_errors decorator renders it as
a panel and exits with status 1.
"""

from typing import Iterable, Optional

from boxcase.paths import MACHINE_DEFAULTS_FILENAME, TEST_CASE_ENV


class BoxcaseError(Exception):
    """Base class for boxcase errors.

    Carries an optional hint that the CLI shows below the message.
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.hint = hint


class ConfigFileError(BoxcaseError):
    """Raised when the test case file is unset, missing, malformed or not a mapping."""

    HINT = (
        f"Set {TEST_CASE_ENV} to the path of a YAML test case, e.g.\n"
        f"  {TEST_CASE_ENV}=tests/cases/web.yml boxcase render"
    )

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, hint or self.HINT)


class MachineDefaultsError(BoxcaseError):
    """Raised when the machine defaults file exists but cannot be used."""

    HINT = (
        f"Fix or remove {MACHINE_DEFAULTS_FILENAME}; "
        "it must contain a single YAML mapping."
    )

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, hint or self.HINT)


class ConfigError(BoxcaseError):
    """Raised when a machine definition is incomplete or has the wrong shape."""


class DispatchError(BoxcaseError):
    """Raised by the configuration object when a key cannot be applied."""


class UnsupportedOptionError(DispatchError):
    """Raised for an unknown provisioner/provider kind, option or method."""

    def __init__(self, section: str, key: str, supported: Iterable[str]):
        supported = sorted(supported)
        self.section = section
        self.key = key
        self.supported = supported
        super().__init__(
            f"Unsupported option '{key}' for {section}",
            hint="Supported: " + (", ".join(supported) if supported else "(none)"),
        )


class OptionTypeError(DispatchError):
    """Raised when a value has the wrong type for a typed setter."""

    def __init__(self, section: str, key: str, value, expected: Iterable[type]):
        names = ", ".join(t.__name__ for t in expected)
        self.section = section
        self.key = key
        super().__init__(
            f"Option '{key}' for {section} expects {names}, "
            f"got {type(value).__name__}: {value!r}"
        )
