# Copyright (c) 2025 Marc Schütze <scharc@gmail.com>
# SPDX-License-Identifier: MIT
# See LICENSE file in the project root for full license information.

"""Pydantic models for normalized machine definitions."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StageConfig(BaseModel):
    """Options and methods for one provisioner or provider.

    options: setter name -> value, applied as assignments
    methods: method name -> argument, applied as calls
    """

    options: Dict[str, Any] = Field(default_factory=dict)
    methods: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("options", "methods", mode="before")
    @classmethod
    def empty_when_null(cls, value: Any) -> Any:
        return {} if value is None else value

    model_config = ConfigDict(extra="forbid")


class Machine(BaseModel):
    """One machine of a test case, after defaults and fallbacks are applied."""

    name: str
    host_name: str
    private_ip: str
    box: Optional[str] = None
    provisioning: Dict[str, StageConfig] = Field(default_factory=dict)
    providers: Dict[str, StageConfig] = Field(default_factory=dict)

    @field_validator("provisioning", "providers", mode="before")
    @classmethod
    def normalize_stages(cls, value: Any) -> Any:
        """Accept null sections and null per-kind configs."""
        if value is None:
            return {}
        if isinstance(value, dict):
            return {kind: ({} if cfg is None else cfg) for kind, cfg in value.items()}
        return value

    @property
    def provisioner_kinds(self) -> List[str]:
        return list(self.provisioning)

    @property
    def provider_kinds(self) -> List[str]:
        return list(self.providers)

    model_config = ConfigDict(extra="allow")  # Test cases may carry extra keys
