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
Common base for the per-feature configuration resources built on a Node.
"""

from typing import Optional

from napalm_eapi.node import RUNNING_CONFIG, Node


class BaseEntity(object):
    """
    Provides the running config, block lookup and configuration helpers shared
    by feature resources (VLANs, interfaces, BGP and so on).
    """

    def __init__(self, node: Node):
        self.node = node

    @property
    def config(self) -> str:
        return self.node.running_config

    @property
    def error(self) -> Optional[Exception]:
        """The last error latched by the node's connection."""
        return self.node.connection.error

    def get_block(self, parent: str) -> str:
        """
        Return the running-config block whose first line is exactly ``parent``.
        """
        return self.node.get_section(f"(?m)^{parent}$", RUNNING_CONFIG)

    def configure(self, *commands: str) -> bool:
        return self.node.config(*commands)

    def command_builder(
        self, cmd: str, value: str = "", default: bool = False, enable: bool = True
    ) -> str:
        """
        Build a configuration command: ``default <cmd>``, ``no <cmd>`` or
        ``<cmd> <value>``.
        """
        if value:
            cmd = f"{cmd} {value}"
        if default:
            return f"default {cmd}"
        if not enable:
            return f"no {cmd}"
        return cmd

    def configure_interface(self, name: str, *commands: str) -> bool:
        return self.configure(f"interface {name}", *commands)
