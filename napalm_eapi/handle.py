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
Request handles batch several commands into one runCmds call and route each
result back into the container that asked for it.
"""

from typing import List, NamedTuple, Optional

from pydantic import ValidationError

from napalm_eapi.envelope import Command, JSONRPCResponse, enable_command
from napalm_eapi.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    ResponseDecodeError,
    ResponseMismatchError,
)

MAX_COMMANDS = 64


class CommandBlock(NamedTuple):
    command: Command
    container: Optional[object] = None


class EapiReqHandle(object):
    """
    Accumulates (command, result container) pairs and sends them in a single
    request with call(). A container is any object offering ``get_cmd()`` and
    ``accept(data)``, and optionally ``decode(data)`` to validate a result before
    any container is filled; see napalm_eapi.types.EapiCommand.

    Handles belong to one Node and are not meant to be shared between threads.
    """

    def __init__(self, node, encoding):
        self.node = node
        self.encoding = encoding
        self.commands: List[CommandBlock] = []
        self.err: Optional[Exception] = None

    def _check_handle(self):
        if self.node is None:
            raise InvalidStateError("No connection")

    def _check_capacity(self):
        if len(self.commands) >= MAX_COMMANDS:
            self.err = InvalidArgumentError(
                f"Limit of {MAX_COMMANDS} commands reached for AddCommand"
            )
            raise self.err

    def add_command_str(self, command: str, container=None):
        """
        Queue ``command``; its result is decoded into ``container`` if given.
        Errors are also kept on the handle and raised again by call().
        """
        self._check_handle()
        self._check_capacity()
        if not command:
            self.err = InvalidArgumentError("Invalid null Command string")
            raise self.err
        self.commands.append(CommandBlock(command, container))

    def add_command(self, container):
        """Queue the command reported by ``container.get_cmd()``."""
        self._check_handle()
        self._check_capacity()
        if not callable(getattr(container, "get_cmd", None)):
            self.err = InvalidArgumentError(f"Invalid command container: {container!r}")
            raise self.err
        self.add_command_str(container.get_cmd(), container)

    def clear_commands(self):
        self.commands = []
        self.err = None

    def call(self):
        """
        Send every queued command, prefixed with enable, and decode the results
        into their containers. The queue is emptied whatever the outcome.
        """
        self._check_handle()
        try:
            if self.err is not None:
                raise self.err
            blocks = [CommandBlock(enable_command(self.node.enable_passwd))] + self.commands
            response = self.node.connection.execute(
                [block.command for block in blocks], self.encoding
            )
            self._parse_response(blocks, response)
        finally:
            self.clear_commands()

    def enable(self, container):
        """Queue ``container`` and call() straight away."""
        self.add_command(container)
        self.call()

    def close(self):
        """Drop queued commands and unbind the node; the handle is unusable afterwards."""
        self.clear_commands()
        self.node = None

    @staticmethod
    def _parse_response(blocks: List[CommandBlock], response: JSONRPCResponse):
        if len(response.result) != len(blocks):
            raise ResponseMismatchError(
                f"Number of Result entries({len(response.result)}) does not match "
                f"commands sent({len(blocks)})"
            )
        decoded = []
        for block, result in zip(blocks, response.result):
            if block.container is None:
                continue
            decode = getattr(block.container, "decode", None)
            try:
                value = decode(result) if decode is not None else result
            except ValidationError as e:
                raise ResponseDecodeError(
                    f"Unable to decode result of '{block.command}': {e}"
                ) from e
            decoded.append((block.container, value))

        # containers are only filled once every result decoded
        for container, value in decoded:
            container.accept(value)
