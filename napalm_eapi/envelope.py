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
JSON-RPC 2.0 envelopes for the eAPI ``runCmds`` method.

The ``cmds`` array is heterogeneous: plain strings are sent as strings and
``{"cmd": ..., "input": ...}`` mappings are sent as mappings, which is how
``enable`` receives its password.
"""

import enum
import os
import re
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from napalm_eapi.exceptions import InvalidArgumentError, ResponseDecodeError

INPUT_VALUE_RE = re.compile(r'"input"\s*:\s*"(?:[^"\\]|\\.)*"')


class Encoding(str, enum.Enum):
    """
    Enum class used to represent the response formats eAPI can return.
    """

    JSON = "json"
    TEXT = "text"


class AuthenticatedCommand(BaseModel):
    cmd: str
    input: str


Command = Union[str, AuthenticatedCommand]


class Parameters(BaseModel):
    version: int = 1
    cmds: List[Command]
    format: Encoding


class JSONRPCRequest(BaseModel):
    jsonrpc: str = "2.0"
    method: str = "runCmds"
    params: Parameters
    id: str


class RespError(BaseModel):
    code: int
    message: str
    data: Any = None


class JSONRPCResponse(BaseModel):
    jsonrpc: str = "2.0"
    result: List[Dict[str, Any]] = Field(default_factory=list)
    error: Optional[RespError] = None
    id: Optional[Union[str, int]] = None


def check_encoding(encoding) -> Encoding:
    """Return the Encoding for ``encoding``, matched case-insensitively."""
    try:
        return Encoding(str(getattr(encoding, "value", encoding)).lower())
    except ValueError:
        raise InvalidArgumentError(f"Invalid encoding specified: {encoding}")


def enable_command(passwd: Optional[str] = None) -> Command:
    """The privileged mode prefix, carrying the enable password when set."""
    if passwd:
        return AuthenticatedCommand(cmd="enable", input=passwd)
    return "enable"


def request_id() -> str:
    return str(os.getpid())


def build_json_request(commands: list, encoding, reqid: str) -> bytes:
    """
    Serialize a runCmds request. Elements of ``commands`` may be strings,
    AuthenticatedCommand instances or ``{"cmd", "input"}`` dicts.
    """
    fmt = check_encoding(encoding)
    try:
        request = JSONRPCRequest(params=Parameters(cmds=commands, format=fmt), id=reqid)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid command list: {e}") from e
    return request.model_dump_json().encode("utf-8")


def redact_request(data: Union[bytes, str]) -> str:
    """Request body as text with every ``input`` value masked."""
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")
    return INPUT_VALUE_RE.sub('"input":"******"', data)


def decode_response(body: Union[bytes, str]) -> JSONRPCResponse:
    """
    Parse a response body. The whole body must be a single JSON-RPC envelope.
    """
    try:
        return JSONRPCResponse.model_validate_json(body)
    except ValidationError as e:
        raise ResponseDecodeError(f"Unable to decode eAPI response: {e}") from e
