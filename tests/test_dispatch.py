# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Tests for applying machines to the Vagrant configuration object."""

from unittest.mock import MagicMock

import pytest

from boxcase.dispatch import configure_machine, simple_groups_to_groups
from boxcase.errors import DispatchError, OptionTypeError, UnsupportedOptionError
from boxcase.normalize import normalize_machine
from boxcase.vagrant.config import MachineConfig, MethodCall, Network


def _machine(**fields):
    fields.setdefault("private_ip", "10.0.0.1")
    return normalize_machine(fields, 0)


def test_box_hostname_and_network():
    vm = configure_machine(
        MachineConfig("web"), _machine(name="web", host_name="web.local", box="ubuntu/jammy64")
    )

    assert vm.box == "ubuntu/jammy64"
    assert vm.hostname == "web.local"
    assert vm.networks == [Network("private_network", {"ip": "10.0.0.1"})]


def test_simple_groups_become_groups():
    machine = _machine(
        name="m1", provisioning={"ansible": {"options": {"simple_groups": ["g1", "g2"]}}}
    )
    vm = configure_machine(MachineConfig("m1"), machine)

    assert vm.provisioners["ansible"].options == {"groups": {"g1": ["m1"], "g2": ["m1"]}}


def test_simple_groups_use_synthesized_name():
    machine = _machine(provisioning={"ansible": {"options": {"simple_groups": ["web"]}}})
    vm = configure_machine(MachineConfig(machine.name), machine)

    assert vm.provisioners["ansible"].groups == {"web": ["test-machine0"]}


def test_simple_groups_only_special_for_ansible():
    machine = _machine(provisioning={"ansible_local": {"options": {"simple_groups": ["web"]}}})

    with pytest.raises(UnsupportedOptionError):
        configure_machine(MachineConfig(machine.name), machine)


def test_provisioner_options_and_methods_in_order():
    machine = _machine(
        provisioning={
            "shell": {"options": {"inline": "echo hi", "privileged": False}},
            "ansible": {"options": {"playbook": "site.yml", "become": True}},
        }
    )
    vm = configure_machine(MachineConfig(machine.name), machine)

    assert list(vm.provisioners) == ["shell", "ansible"]
    assert vm.provisioners["shell"].options == {"inline": "echo hi", "privileged": False}
    assert list(vm.provisioners["ansible"].options) == ["playbook", "become"]


def test_provider_options_and_methods():
    machine = _machine(
        providers={
            "virtualbox": {
                "options": {"memory": 2048, "cpus": 2},
                "methods": {"customize": ["modifyvm", ":id", "--ioapic", "on"]},
            }
        }
    )
    vm = configure_machine(MachineConfig(machine.name), machine)
    provider = vm.providers["virtualbox"]

    assert provider.options == {"memory": 2048, "cpus": 2}
    assert provider.calls == [MethodCall("customize", (["modifyvm", ":id", "--ioapic", "on"],))]


def test_splat_method_passes_separate_arguments():
    machine = _machine(
        providers={"libvirt": {"methods": {"storage": [":file", {"size": "20G"}]}}}
    )
    vm = configure_machine(MachineConfig(machine.name), machine)

    assert vm.providers["libvirt"].calls == [MethodCall("storage", (":file", {"size": "20G"}))]


def test_provider_has_no_group_special_case():
    machine = _machine(providers={"virtualbox": {"options": {"simple_groups": ["web"]}}})

    with pytest.raises(UnsupportedOptionError):
        configure_machine(MachineConfig(machine.name), machine)


def test_unknown_option_propagates():
    machine = _machine(provisioning={"ansible": {"options": {"playbok": "site.yml"}}})

    with pytest.raises(UnsupportedOptionError) as exc_info:
        configure_machine(MachineConfig(machine.name), machine)
    assert "playbok" in str(exc_info.value)
    assert "playbook" in exc_info.value.hint


def test_wrong_type_propagates():
    machine = _machine(providers={"virtualbox": {"options": {"cpus": "two"}}})

    with pytest.raises(OptionTypeError):
        configure_machine(MachineConfig(machine.name), machine)


def test_unknown_kind_propagates():
    machine = _machine(provisioning={"chef_solo": {"options": {}}})

    with pytest.raises(UnsupportedOptionError) as exc_info:
        configure_machine(MachineConfig(machine.name), machine)
    assert "chef_solo" in str(exc_info.value)


def test_simple_groups_must_be_list_of_strings():
    with pytest.raises(DispatchError):
        simple_groups_to_groups("web", "m1")
    with pytest.raises(DispatchError):
        simple_groups_to_groups(["web", {"db": 1}], "m1")


def test_simple_groups_to_groups():
    assert simple_groups_to_groups(["g1", "g2"], "m1") == {"g1": ["m1"], "g2": ["m1"]}
    assert simple_groups_to_groups([], "m1") == {}


def test_dispatch_drives_any_duck_typed_configuration_object():
    vm = MagicMock()
    machine = _machine(
        name="m1",
        box="b",
        provisioning={"ansible": {"options": {"simple_groups": ["g"]}, "methods": {"reset": None}}},
        providers={"docker": {"options": {"image": "nginx"}}},
    )

    configure_machine(vm, machine)

    vm.network.assert_called_once_with("private_network", ip="10.0.0.1")
    provisioner = vm.provision.return_value
    vm.provision.assert_called_once_with("ansible")
    provisioner.set_option.assert_called_once_with("groups", {"g": ["m1"]})
    provisioner.call.assert_called_once_with("reset", None)
    vm.provider.return_value.set_option.assert_called_once_with("image", "nginx")
