# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the runCmds envelope codec."""
import json
import os

import pytest

from napalm_eapi.envelope import (
    AuthenticatedCommand,
    Encoding,
    build_json_request,
    check_encoding,
    decode_response,
    enable_command,
    request_id,
)
from napalm_eapi.exceptions import InvalidArgumentError, ResponseDecodeError


def test_build_json_request_keeps_command_shapes():
    data = build_json_request(
        [{"cmd": "enable", "input": "root"}, "show version"], "json", "42"
    )
    assert json.loads(data) == {
        "jsonrpc": "2.0",
        "method": "runCmds",
        "params": {
            "version": 1,
            "cmds": [{"cmd": "enable", "input": "root"}, "show version"],
            "format": "json",
        },
        "id": "42",
    }


def test_build_json_request_text_format():
    data = json.loads(build_json_request(["enable", "show clock"], Encoding.TEXT, "1"))
    assert data["params"]["format"] == "text"
    assert data["params"]["cmds"] == ["enable", "show clock"]


def test_build_json_request_rejects_bad_encoding():
    with pytest.raises(InvalidArgumentError):
        build_json_request(["show version"], "xml", "1")


def test_build_json_request_rejects_bad_command():
    with pytest.raises(InvalidArgumentError):
        build_json_request([{"cmd": "enable"}], "json", "1")


@pytest.mark.parametrize("value,expected", [
    ("json", Encoding.JSON),
    ("JSON", Encoding.JSON),
    ("Text", Encoding.TEXT),
    (Encoding.TEXT, Encoding.TEXT),
])
def test_check_encoding(value, expected):
    assert check_encoding(value) is expected


def test_enable_command():
    assert enable_command() == "enable"
    assert enable_command("") == "enable"
    assert enable_command("root") == AuthenticatedCommand(cmd="enable", input="root")


def test_request_id_is_process_id():
    assert request_id() == str(os.getpid())


def test_decode_response_result():
    body = b'{"jsonrpc": "2.0", "result": [{}, {"output": "veos01\\n"}], "id": "42"}'
    response = decode_response(body)
    assert response.error is None
    assert response.result == [{}, {"output": "veos01\n"}]
    assert response.id == "42"


def test_decode_response_error():
    body = json.dumps({
        "jsonrpc": "2.0",
        "error": {
            "code": 1002,
            "message": "CLI command 2 of 2 'show bogus' failed: invalid command",
            "data": [{}, {"errors": ["Invalid input (at token 1: 'bogus')"]}],
        },
        "id": "42",
    })
    response = decode_response(body)
    assert response.result == []
    assert response.error.code == 1002
    assert response.error.data[1]["errors"]


@pytest.mark.parametrize("body", [
    b"",
    b"<html>502 Bad Gateway</html>",
    b'{"jsonrpc": "2.0", "result": [], "id": "1"} trailing',
    b'{"jsonrpc": "2.0", "result": "not a list", "id": "1"}',
])
def test_decode_response_rejects_malformed_body(body):
    with pytest.raises(ResponseDecodeError):
        decode_response(body)
