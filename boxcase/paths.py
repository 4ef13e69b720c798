# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Well-known names used by boxcase.

Only the CLI entry point resolves these against the environment and the
working directory; everything below it receives explicit values.
"""


# Environment variable holding the test case path (required)
TEST_CASE_ENV = "TEST_CASE_CONFIG"

# Optional machine defaults, looked up in the working directory
MACHINE_DEFAULTS_FILENAME = ".test_machine_defaults.yml"

# Default output for `boxcase render`
VAGRANTFILE_NAME = "Vagrantfile"

# Vagrant configuration API version written into rendered files
VAGRANT_API_VERSION = "2"
