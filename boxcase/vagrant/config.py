# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""In-memory Vagrant configuration assembled by the dispatcher.

Mirrors the parts of Vagrant's configuration DSL that boxcase drives:

    config.vm.define "web" do |machine|
      machine.vm.box = "..."
      machine.vm.hostname = "..."
      machine.vm.network "private_network", ip: "..."
      machine.vm.provision "ansible" do |ansible| ... end
      machine.vm.provider "virtualbox" do |vb| ... end
    end

Sections only accept the options and methods their kind declares in
boxcase.vagrant.registry. The result is turned into a Vagrantfile by
boxcase.vagrant.render.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from boxcase.errors import DispatchError, OptionTypeError, UnsupportedOptionError
from boxcase.vagrant.registry import KindSpec, get_provider, get_provisioner

NETWORK_KINDS = ("private_network", "public_network", "forwarded_port")


@dataclass(frozen=True)
class MethodCall:
    """A recorded method call on a section."""

    name: str
    args: Tuple[Any, ...] = ()


@dataclass
class Network:
    """A ``vm.network`` declaration."""

    kind: str
    options: Dict[str, Any] = field(default_factory=dict)


class SectionConfig:
    """Configuration block of one provisioner or provider.

    Options are set with ``set_option`` or plain attribute assignment
    (``section.playbook = "site.yml"``); methods are recorded with ``call``.
    """

    section_type = "section"

    def __init__(self, spec: KindSpec):
        self._spec = spec
        self._options: Dict[str, Any] = {}
        self._calls: List[MethodCall] = []

    @property
    def kind(self) -> str:
        return self._spec.kind

    @property
    def spec(self) -> KindSpec:
        return self._spec

    @property
    def options(self) -> Dict[str, Any]:
        """Options set so far, in assignment order."""
        return self._options

    @property
    def calls(self) -> List[MethodCall]:
        """Method calls recorded so far, in call order."""
        return self._calls

    @property
    def label(self) -> str:
        return f"{self.section_type} '{self.kind}'"

    def set_option(self, name: str, value: Any) -> None:
        """Assign an option after checking it is declared and well-typed."""
        option = self._spec.options.get(name)
        if option is None:
            raise UnsupportedOptionError(self.label, name, self._spec.options)
        if not option.accepts(value):
            raise OptionTypeError(self.label, name, value, option.types)
        self._options[name] = value

    def call(self, name: str, value: Any = None) -> None:
        """Record a call of a declared method with ``value`` as its argument."""
        method = self._spec.methods.get(name)
        if method is None:
            raise UnsupportedOptionError(self.label, f"{name}()", self._spec.methods)

        if not method.takes_argument:
            if value is not None:
                raise DispatchError(f"Method '{name}' of {self.label} takes no argument")
            args: Tuple[Any, ...] = ()
        elif method.splat:
            if not isinstance(value, list):
                raise OptionTypeError(self.label, name, value, (list,))
            args = tuple(value)
        else:
            args = (value,)

        self._calls.append(MethodCall(name, args))

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
        else:
            self.set_option(name, value)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if not name.startswith("_") and name in self._options:
            return self._options[name]
        raise AttributeError(f"{type(self).__name__} has no attribute '{name}'")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind!r}, options={self._options!r})"


class ProvisionerConfig(SectionConfig):
    section_type = "provisioner"


class ProviderConfig(SectionConfig):
    section_type = "provider"


class MachineConfig:
    """Configuration of a single defined machine."""

    def __init__(self, name: str):
        self.name = name
        self.box: Optional[str] = None
        self.hostname: Optional[str] = None
        self.networks: List[Network] = []
        self.provisioners: Dict[str, ProvisionerConfig] = {}
        self.providers: Dict[str, ProviderConfig] = {}

    def network(self, kind: str, **options: Any) -> Network:
        if kind not in NETWORK_KINDS:
            raise UnsupportedOptionError(f"machine '{self.name}' networks", kind, NETWORK_KINDS)
        network = Network(kind, dict(options))
        self.networks.append(network)
        return network

    def provision(self, kind: str) -> ProvisionerConfig:
        """Return the provisioner section for ``kind``, creating it on first use."""
        if kind not in self.provisioners:
            self.provisioners[kind] = ProvisionerConfig(get_provisioner(kind))
        return self.provisioners[kind]

    def provider(self, kind: str) -> ProviderConfig:
        """Return the provider section for ``kind``, creating it on first use."""
        if kind not in self.providers:
            self.providers[kind] = ProviderConfig(get_provider(kind))
        return self.providers[kind]


class VagrantConfig:
    """Root configuration holding the defined machines."""

    def __init__(self):
        self._machines: Dict[str, MachineConfig] = {}

    @property
    def machines(self) -> List[MachineConfig]:
        """Machines in definition order."""
        return list(self._machines.values())

    def define(self, name: str) -> MachineConfig:
        if name in self._machines:
            raise DispatchError(
                f"Machine '{name}' is defined twice",
                hint="Give every machine a unique 'name'.",
            )
        machine = MachineConfig(name)
        self._machines[name] = machine
        return machine

    def __getitem__(self, name: str) -> MachineConfig:
        return self._machines[name]

    def __len__(self) -> int:
        return len(self._machines)
