# -*- coding: utf-8 -*-
# Copyright 2021 Nokia. All rights reserved.
#
# The contents of this file are licensed under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with the
# License. You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.
# SPDX-License-Identifier: Apache-2.0

"""
Result containers for request handles.

A container reports the command it belongs to with get_cmd() and receives the
decoded result object through accept(). Field values are looked up under the
field's alias, the camelCase form of its name unless set with Field(alias=...).
"""

from typing import Any, ClassVar, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EapiCommand(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )

    command: ClassVar[str] = ""

    def get_cmd(self) -> str:
        return self.command

    def decode(self, data: Dict[str, Any]) -> "EapiCommand":
        """Validate ``data`` without touching this container."""
        return self.model_validate(data)

    def accept(self, data):
        decoded = data if isinstance(data, type(self)) else self.decode(data)
        for name in type(self).model_fields:
            setattr(self, name, getattr(decoded, name))

    @classmethod
    def key_map(cls) -> Dict[str, str]:
        """Field name to result key mapping."""
        return {
            name: field.alias or name for name, field in cls.model_fields.items()
        }


class RawResult(object):
    """Keeps the undecoded result object of an arbitrary command."""

    def __init__(self, command: str = ""):
        self.command = command
        self.data: Dict[str, Any] = {}

    def get_cmd(self) -> str:
        return self.command

    def accept(self, data: Dict[str, Any]):
        self.data = data


class CommandOutput(EapiCommand):
    """Output of a command sent with text encoding."""

    output: str = ""


class ShowVersion(EapiCommand):
    command: ClassVar[str] = "show version"

    model_name: str = ""
    internal_version: str = ""
    system_mac_address: str = ""
    serial_number: str = ""
    mem_total: int = 0
    bootup_timestamp: float = 0.0
    mem_free: int = 0
    version: str = ""
    architecture: str = ""
    internal_build_id: str = ""
    hardware_revision: str = ""


class ShowHostname(EapiCommand):
    command: ClassVar[str] = "show hostname"

    hostname: str = ""
    fqdn: str = ""


class IPAddress(EapiCommand):
    address: str = ""
    mask_len: int = 0


class InterfaceAddress(EapiCommand):
    broadcast_address: str = ""
    primary_ip: IPAddress = Field(default_factory=IPAddress)
    secondary_ips_ordered_list: List[IPAddress] = Field(default_factory=list)


class SwitchInterface(EapiCommand):
    name: str = ""
    bandwidth: int = 0
    burned_in_address: str = ""
    description: str = ""
    forwarding_model: str = ""
    hardware: str = ""
    interface_address: List[InterfaceAddress] = Field(default_factory=list)
    interface_membership: str = ""
    interface_status: str = ""
    l2_mtu: int = 0
    last_status_change_timestamp: float = 0.0
    line_protocol_status: str = ""
    mtu: int = 0
    physical_address: str = ""


class ShowInterfaces(EapiCommand):
    command: ClassVar[str] = "show interfaces"

    interfaces: Dict[str, SwitchInterface] = Field(default_factory=dict)
