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
Node: the device facing object used to send commands and read configuration.
"""

import logging
import re
from typing import Dict, List, Optional

from napalm_eapi.connection import EapiConnection
from napalm_eapi.envelope import (
    Encoding,
    JSONRPCResponse,
    check_encoding,
    enable_command,
)
from napalm_eapi.exceptions import (
    EapiError,
    InvalidArgumentError,
    SectionNotFoundError,
)
from napalm_eapi.handle import EapiReqHandle

RUNNING_CONFIG = "running-config"
STARTUP_CONFIG = "startup-config"

CONFIG_MODE_RE = re.compile(r"^\s*configure(\s+terminal)?\s*$")
BLOCK_END_RE = re.compile(r"^\S", re.M)


class Node(object):
    """
    Represents a single device for sending and receiving eAPI commands.

    The running and startup configurations are fetched lazily and cached.
    When ``auto_refresh`` is set, both caches are dropped after every config()
    call so the next read reflects the change.
    """

    def __init__(
        self,
        connection: EapiConnection,
        enable_passwd: Optional[str] = None,
        auto_refresh: bool = False,
    ):
        """Constructor."""
        self.connection = connection
        self.auto_refresh = auto_refresh
        self.enable_passwd = ""
        self._running_config = ""
        self._startup_config = ""
        if enable_passwd:
            self.enable_authentication(enable_passwd)

    def enable_authentication(self, passwd: Optional[str]):
        """Set the password sent with the enable command."""
        self.enable_passwd = (passwd or "").strip()

    @property
    def running_config(self) -> str:
        if not self._running_config:
            self._running_config = self.get_config(RUNNING_CONFIG, "all")
        return self._running_config

    @property
    def startup_config(self) -> str:
        if not self._startup_config:
            self._startup_config = self.get_config(STARTUP_CONFIG)
        return self._startup_config

    def refresh(self):
        """Drop both cached configurations."""
        self._running_config = ""
        self._startup_config = ""

    def get_config(self, config: str, params: str = "") -> str:
        """
        Fetch ``config`` ('running-config' or 'startup-config') from the
        device, bypassing the cache.
        """
        if config not in (RUNNING_CONFIG, STARTUP_CONFIG):
            raise InvalidArgumentError(f"Invalid config type: {config}")
        command = " ".join(p for p in ("show", config, params) if p)
        response = self.run_commands([command], Encoding.TEXT)
        return response.result[0].get("output", "").strip()

    def get_section(self, regex: str, config: str = "") -> str:
        """
        Return the block of ``config`` starting at the first match of ``regex``
        and ending before the next line that starts in column zero.

        The pattern is compiled in multiline mode and used as given; callers
        supply their own anchors.
        """
        if config in ("", RUNNING_CONFIG):
            config = RUNNING_CONFIG
        elif config != STARTUP_CONFIG:
            raise InvalidArgumentError(f"Invalid config type: {config}")

        try:
            section_re = re.compile(regex, re.M)
        except re.error as e:
            raise InvalidArgumentError(f"Invalid regexp: {regex}") from e

        text = self.running_config if config == RUNNING_CONFIG else self.startup_config
        if not text:
            raise SectionNotFoundError(f"No {config} available")

        match = section_re.search(text)
        if match is None:
            raise SectionNotFoundError(f"Config section not found: {regex}")

        block_end = BLOCK_END_RE.search(text[match.end():])
        if block_end is None:
            raise SectionNotFoundError("Block section/end not found")
        return text[match.start():match.end() + block_end.start()]

    def run_commands(self, commands: List[str], encoding=Encoding.JSON) -> JSONRPCResponse:
        """
        Run ``commands`` in privileged mode. The response to the injected
        enable command is removed, so results line up with ``commands``.
        """
        encoding = check_encoding(encoding)
        cmds = [enable_command(self.enable_passwd)] + list(commands)
        response = self.connection.execute(cmds, encoding)
        return response.model_copy(update={"result": response.result[1:]})

    @staticmethod
    def check_not_config_mode(commands: List[str]):
        """Raise InvalidArgumentError if any command enters configuration mode."""
        for cmd in commands:
            if CONFIG_MODE_RE.match(cmd):
                raise InvalidArgumentError("Config mode commands not supported")

    def enable(self, commands: List[str]) -> List[Dict[str, str]]:
        """
        Run non configuration commands with text encoding. Returns one
        ``{"command": ..., "result": ...}`` dict per command.
        """
        self.check_not_config_mode(commands)
        response = self.run_commands(commands, Encoding.TEXT)
        return [
            {"command": cmd, "result": result.get("output", "").strip()}
            for cmd, result in zip(commands, response.result)
        ]

    def config_with_err(self, *commands: str) -> JSONRPCResponse:
        """
        Send ``commands`` in configuration mode, raising on failure.
        """
        try:
            return self.run_commands(["configure terminal"] + list(commands), Encoding.JSON)
        finally:
            if self.auto_refresh:
                self.refresh()

    def config(self, *commands: str) -> bool:
        """
        Send ``commands`` in configuration mode. Returns False on any error.
        """
        try:
            self.config_with_err(*commands)
        except EapiError as e:
            logging.error(f"Configuration failed: {e}")
            return False
        return True

    def get_handle(self, encoding) -> EapiReqHandle:
        """Return a new request handle bound to this node."""
        return EapiReqHandle(self, check_encoding(encoding))
