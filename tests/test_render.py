# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Tests for Vagrantfile rendering."""

import pytest

from boxcase.builder import build_config
from boxcase.vagrant.config import VagrantConfig
from boxcase.vagrant.render import block_variable, render_vagrantfile, ruby_literal


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "nil"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (1.5, "1.5"),
        ("site.yml", '"site.yml"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("#{danger}", '"\\#{danger}"'),
        ("pa#@word", '"pa\\#@word"'),
        ("#@@count #$stdout", '"\\#@@count \\#$stdout"'),
        ("issue #12", '"issue #12"'),
        (float("inf"), "Float::INFINITY"),
        (float("-inf"), "-Float::INFINITY"),
        (float("nan"), "Float::NAN"),
        ("line\nbreak", '"line\\nbreak"'),
        (":id", ":id"),
        (":not a symbol", '":not a symbol"'),
        (["modifyvm", ":id", "--cpus", 2], '["modifyvm", :id, "--cpus", 2]'),
        ({"web": ["m1"]}, '{"web" => ["m1"]}'),
        ({}, "{}"),
    ],
)
def test_ruby_literal(value, expected):
    assert ruby_literal(value) == expected


def test_block_variable():
    assert block_variable("virtualbox") == "virtualbox"
    assert block_variable("ansible_local") == "ansible_local"
    assert block_variable("vmware-desktop") == "vmware_desktop"


def test_empty_config():
    text = render_vagrantfile(VagrantConfig())

    assert 'Vagrant.configure("2") do |config|' in text
    assert text.endswith("end\n")


def test_full_machine_block():
    config = build_config(
        {
            "machines": [
                {
                    "name": "m1",
                    "private_ip": "10.0.0.1",
                    "box": "ubuntu/jammy64",
                    "provisioning": {
                        "ansible": {"options": {"playbook": "site.yml", "simple_groups": ["web"]}}
                    },
                    "providers": {
                        "virtualbox": {
                            "options": {"memory": 1024},
                            "methods": {"customize": ["modifyvm", ":id", "--ioapic", "on"]},
                        }
                    },
                }
            ]
        }
    )

    text = render_vagrantfile(config, source="cases/web.yml")

    expected_block = "\n".join(
        [
            '  config.vm.define "m1" do |machine|',
            '    machine.vm.box = "ubuntu/jammy64"',
            '    machine.vm.hostname = "m1"',
            '    machine.vm.network "private_network", ip: "10.0.0.1"',
            '    machine.vm.provision "ansible" do |ansible|',
            '      ansible.playbook = "site.yml"',
            '      ansible.groups = {"web" => ["m1"]}',
            "    end",
            '    machine.vm.provider "virtualbox" do |virtualbox|',
            "      virtualbox.memory = 1024",
            '      virtualbox.customize(["modifyvm", :id, "--ioapic", "on"])',
            "    end",
            "  end",
        ]
    )
    assert expected_block in text
    assert "from cases/web.yml" in text.splitlines()[2]


def test_box_omitted_when_unset():
    text = render_vagrantfile(build_config({"private_ip": "10.0.0.1"}))

    assert "machine.vm.box" not in text
    assert 'machine.vm.hostname = "test-machine0"' in text


def test_splat_and_zero_argument_methods():
    config = build_config(
        {
            "private_ip": "10.0.0.1",
            "providers": {"libvirt": {"methods": {"storage": [":file", {"size": "20G"}]}}},
        }
    )

    text = render_vagrantfile(config)

    assert 'libvirt.storage(:file, {"size" => "20G"})' in text


def test_machines_separated_by_blank_line():
    config = build_config({"machines": [{"private_ip": "10.0.0.1"}, {"private_ip": "10.0.0.2"}]})
    lines = render_vagrantfile(config).splitlines()

    end_of_first = lines.index('  config.vm.define "test-machine1" do |machine|') - 1
    assert lines[end_of_first] == ""


def test_interpolation_markers_in_values_stay_literal():
    config = build_config(
        {
            "private_ip": "10.0.0.1",
            "box": "pa#@word",
            "provisioning": {
                "ansible": {"options": {"extra_vars": {"secret": "x#$y", "tmpl": "#{user}"}}}
            },
        }
    )

    text = render_vagrantfile(config)

    assert 'machine.vm.box = "pa\\#@word"' in text
    assert 'ansible.extra_vars = {"secret" => "x\\#$y", "tmpl" => "\\#{user}"}' in text
