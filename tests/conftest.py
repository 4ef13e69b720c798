# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Shared fixtures for boxcase tests."""

import pytest
import yaml

from boxcase.paths import MACHINE_DEFAULTS_FILENAME, TEST_CASE_ENV


@pytest.fixture
def write_yaml(tmp_path):
    """Return a helper that dumps data as YAML into tmp_path/<name>."""

    def _write(name, data):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False))
        return path

    return _write


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """Run the test inside tmp_path with no test case configured."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(TEST_CASE_ENV, raising=False)
    return tmp_path


@pytest.fixture
def two_machine_case():
    """Test case with two unnamed machines and an ansible provisioner."""
    return {
        "machines": [
            {
                "private_ip": "10.0.0.1",
                "provisioning": {
                    "ansible": {"options": {"playbook": "site.yml", "simple_groups": ["web"]}}
                },
            },
            {"private_ip": "10.0.0.2", "name": "db", "host_name": "db.local"},
        ]
    }


@pytest.fixture
def machine_defaults():
    """Defaults giving every machine a box and a virtualbox provider."""
    return {
        "box": "ubuntu/jammy64",
        "providers": {
            "virtualbox": {
                "options": {"memory": 1024, "cpus": 2},
                "methods": {"customize": ["modifyvm", ":id", "--ioapic", "on"]},
            }
        },
    }


@pytest.fixture
def defaults_file(project_dir, machine_defaults):
    """Write machine_defaults to the well-known defaults file."""
    path = project_dir / MACHINE_DEFAULTS_FILENAME
    path.write_text(yaml.safe_dump(machine_defaults, sort_keys=False))
    return path
