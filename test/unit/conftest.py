# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

"""Test fixtures."""
import json
import pathlib

import pytest

from napalm_eapi.connection import EapiConnection
from napalm_eapi.envelope import JSONRPCResponse, build_json_request
from napalm_eapi.node import Node

MOCKED_DATA = pathlib.Path(__file__).parent / "mocked_data"


def read_mocked(filename):
    return (MOCKED_DATA / filename).read_text()


def load_mocked(filename):
    return json.loads(read_mocked(filename))


def default_outputs():
    return {
        "show running-config all": {"output": read_mocked("running_config.txt")},
        "show running-config": {"output": read_mocked("running_config.txt")},
        "show startup-config": {"output": read_mocked("startup_config.txt")},
        "show version": load_mocked("show_version.json"),
        "show hostname": load_mocked("show_hostname.json"),
        "show interfaces": load_mocked("show_interfaces.json"),
    }


class FakeConnection(EapiConnection):
    """
    Connection double: records the params of every request and answers each
    command from ``outputs`` (an empty object for anything unknown).
    """

    transport = "fake"

    def __init__(self, outputs=None):
        super().__init__("localhost")
        self.outputs = default_outputs() if outputs is None else outputs
        self.requests = []
        self.fail_with = None

    def execute(self, commands, encoding):
        self.clear_error()
        request = json.loads(build_json_request(commands, encoding, "test"))
        self.requests.append(request["params"])
        if self.fail_with is not None:
            self.set_error(self.fail_with)
            raise self.fail_with
        return JSONRPCResponse(result=[self._output(cmd) for cmd in commands], id="test")

    def _output(self, cmd):
        if not isinstance(cmd, str):
            return {}
        return self.outputs.get(cmd, {})

    def sent(self, command):
        """Number of requests that carried ``command``."""
        return sum(1 for params in self.requests if command in params["cmds"])


@pytest.fixture
def connection():
    return FakeConnection()


@pytest.fixture
def node(connection):
    return Node(connection)
