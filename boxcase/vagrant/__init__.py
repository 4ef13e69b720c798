# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Vagrant configuration model, supported kinds and Vagrantfile rendering."""

from boxcase.vagrant.config import (
    MachineConfig,
    MethodCall,
    Network,
    ProviderConfig,
    ProvisionerConfig,
    VagrantConfig,
)
from boxcase.vagrant.render import render_vagrantfile, ruby_literal

__all__ = [
    "MachineConfig",
    "MethodCall",
    "Network",
    "ProviderConfig",
    "ProvisionerConfig",
    "VagrantConfig",
    "render_vagrantfile",
    "ruby_literal",
]
