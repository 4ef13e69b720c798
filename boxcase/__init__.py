# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""boxcase - Build Vagrant machine configurations from YAML test cases."""

__version__ = "0.1.0"
