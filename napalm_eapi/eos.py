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
Napalm driver for eAPI enabled switches.

Read https://napalm.readthedocs.io for more information.
"""

import time
from typing import AnyStr, List, Optional

from napalm.base import NetworkDriver
from napalm.base.exceptions import ConnectionException
from napalm.base.helpers import mac

from napalm_eapi.connection import EapiConnection, HttpsEapiConnection, connect
from napalm_eapi.envelope import Encoding, check_encoding
from napalm_eapi.exceptions import EapiError
from napalm_eapi.node import RUNNING_CONFIG, STARTUP_CONFIG, Node
from napalm_eapi.types import ShowHostname, ShowInterfaces, ShowVersion


class EOSEapiDriver(NetworkDriver):
    """Napalm driver talking to a switch over eAPI."""

    def __init__(self, hostname, username, password, timeout=60, optional_args=None):
        """Constructor."""
        self.hostname = hostname
        self.username = username
        self.password = password
        self.timeout = timeout

        if optional_args is None:
            optional_args = {}

        # Optional Arguments
        self.transport = optional_args.get("transport", "https")
        self.port = optional_args.get("port")
        self.enable_password = optional_args.get("enable_password", "")
        self.auto_refresh = optional_args.get("auto_refresh", True)
        self.verify = optional_args.get("verify", False)

        self.device: Optional[Node] = None

    def _new_connection(self) -> EapiConnection:
        connection = connect(
            self.transport,
            self.hostname,
            self.username,
            self.password,
            self.port,
            self.timeout,
        )
        if self.verify and isinstance(connection, HttpsEapiConnection):
            connection.enable_certificate_verification()
        return connection

    def open(self) -> None:
        """Build the node and check the device answers."""
        try:
            self.device = Node(
                self._new_connection(),
                enable_passwd=self.enable_password,
                auto_refresh=self.auto_refresh,
            )
            self.device.run_commands([ShowVersion.command])
        except EapiError as e:
            raise ConnectionException(
                f"Error opening connection to {self.hostname}: {e}"
            ) from e

    def close(self) -> None:
        if self.device is not None:
            self.device.connection.close()

    def is_alive(self) -> dict:
        """
        Tests if the device is reachable. Returns a dict with a single key: 'is_alive', value is a bool.
        """
        if self.device is None:
            return {"is_alive": False}
        try:
            self.device.run_commands([ShowHostname.command])
            return {"is_alive": True}
        except EapiError:
            return {"is_alive": False}

    def cli(self, commands: List[str], encoding: AnyStr = "text") -> dict:
        """
        Will execute a list of commands and return the output in a dictionary format.
        """
        encoding = check_encoding(encoding)
        if encoding == Encoding.TEXT:
            return {r["command"]: r["result"] for r in self.device.enable(commands)}
        self.device.check_not_config_mode(commands)
        response = self.device.run_commands(commands, Encoding.JSON)
        return dict(zip(commands, response.result))

    def get_config(self, retrieve="all", full=False, sanitized=False) -> dict:
        """
        Return the configuration of a device.
            retrieve: which configuration type you want to populate, default is all of them.
            full: include default values in the running configuration.
        The candidate configuration is always empty, eAPI has no candidate datastore here.
        """
        if sanitized:
            raise NotImplementedError("sanitized configuration is not supported")

        config = {"running": "", "startup": "", "candidate": ""}
        if retrieve in ("all", "running"):
            config["running"] = self.device.get_config(RUNNING_CONFIG, "all" if full else "")
        if retrieve in ("all", "startup"):
            config["startup"] = self.device.get_config(STARTUP_CONFIG)
        return config

    def get_facts(self) -> dict:
        """
        Returns a dictionary containing the following information:
            uptime - Uptime of the device in seconds.
            vendor - Manufacturer of the device.
            model - Device model.
            hostname - Hostname of the device
            fqdn - Fqdn of the device
            os_version - String with the OS version running on the device.
            serial_number - Serial number of the device
            interface_list - List of the interfaces of the device
        """
        version = ShowVersion()
        hostname = ShowHostname()
        interfaces = ShowInterfaces()

        handle = self.device.get_handle(Encoding.JSON)
        try:
            handle.add_command(version)
            handle.add_command(hostname)
            handle.add_command(interfaces)
            handle.call()
        finally:
            handle.close()

        uptime = -1.0
        if version.bootup_timestamp:
            uptime = time.time() - version.bootup_timestamp

        return {
            "uptime": uptime,
            "vendor": "Arista",
            "model": version.model_name,
            "hostname": hostname.hostname,
            "fqdn": hostname.fqdn,
            "os_version": version.version,
            "serial_number": version.serial_number,
            "interface_list": sorted(interfaces.interfaces),
        }

    def get_interfaces(self) -> dict:
        """
        Returns a dictionary of dictionaries. The keys for the first dictionary will be the interfaces in the devices.
        The inner dictionary will containing the following data for each interface:
            is_up (True/False)
            is_enabled (True/False)
            description (string)
            last_flapped (float in seconds)
            speed (float in Mbit)
            MTU (in Bytes)
            mac_address (string)
        """
        interfaces = ShowInterfaces()
        handle = self.device.get_handle(Encoding.JSON)
        try:
            handle.enable(interfaces)
        finally:
            handle.close()

        interfaces_dict = {}
        for name, intf in interfaces.interfaces.items():
            interfaces_dict[name] = {
                "is_up": intf.line_protocol_status == "up",
                "is_enabled": intf.interface_status != "disabled",
                "description": intf.description,
                "last_flapped": intf.last_status_change_timestamp or -1.0,
                "speed": float(intf.bandwidth) / 1e6,
                "mtu": intf.mtu,
                "mac_address": mac(intf.physical_address) if intf.physical_address else "",
            }
        return interfaces_dict
