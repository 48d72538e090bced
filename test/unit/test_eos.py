# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the NAPALM driver."""
import pytest
from napalm.base.exceptions import ConnectionException

from conftest import FakeConnection, read_mocked

from napalm_eapi.eos import EOSEapiDriver
from napalm_eapi.exceptions import InvalidArgumentError, TransportError
from napalm_eapi.node import Node


@pytest.fixture
def driver(connection):
    driver = EOSEapiDriver("veos01", "admin", "admin")
    driver.device = Node(connection)
    return driver


def test_optional_args():
    driver = EOSEapiDriver(
        "veos01",
        "admin",
        "admin",
        optional_args={"transport": "http", "port": 8080, "enable_password": "root"},
    )
    connection = driver._new_connection()
    assert connection.transport == "http"
    assert connection.port == 8080
    assert driver.enable_password == "root"


def test_verify_enables_certificate_verification():
    driver = EOSEapiDriver("veos01", "admin", "admin", optional_args={"verify": True})
    assert driver._new_connection().enforce_verification is True


def test_open(monkeypatch):
    connection = FakeConnection()
    driver = EOSEapiDriver("veos01", "admin", "admin", optional_args={"enable_password": "root"})
    monkeypatch.setattr(driver, "_new_connection", lambda: connection)

    driver.open()

    assert driver.device.connection is connection
    assert driver.device.enable_passwd == "root"
    assert connection.requests[-1]["cmds"][1] == "show version"


def test_open_failure(monkeypatch):
    connection = FakeConnection()
    connection.fail_with = TransportError("connection refused")
    driver = EOSEapiDriver("veos01", "admin", "admin")
    monkeypatch.setattr(driver, "_new_connection", lambda: connection)

    with pytest.raises(ConnectionException):
        driver.open()


def test_is_alive(driver, connection):
    assert driver.is_alive() == {"is_alive": True}
    connection.fail_with = TransportError("connection refused")
    assert driver.is_alive() == {"is_alive": False}


def test_is_alive_before_open():
    assert EOSEapiDriver("veos01", "admin", "admin").is_alive() == {"is_alive": False}


def test_cli_text(driver, connection):
    connection.outputs = {"show clock": {"output": "Tue Jan 16 21:00:00 2018\n"}}
    assert driver.cli(["show clock"]) == {"show clock": "Tue Jan 16 21:00:00 2018"}


def test_cli_json(driver):
    output = driver.cli(["show hostname"], encoding="json")
    assert output == {"show hostname": {"hostname": "veos01", "fqdn": "veos01.example.com"}}


@pytest.mark.parametrize("encoding", ["text", "json"])
def test_cli_rejects_config_mode(driver, connection, encoding):
    with pytest.raises(InvalidArgumentError):
        driver.cli(["configure terminal", "hostname x"], encoding=encoding)
    assert connection.requests == []


def test_get_config(driver, connection):
    config = driver.get_config(full=True)

    assert config["running"] == read_mocked("running_config.txt").strip()
    assert config["startup"] == read_mocked("startup_config.txt").strip()
    assert config["candidate"] == ""
    assert connection.sent("show running-config all") == 1


def test_get_config_running_only(driver, connection):
    config = driver.get_config(retrieve="running")
    assert config["startup"] == ""
    assert connection.sent("show running-config") == 1
    assert connection.sent("show startup-config") == 0


def test_get_config_sanitized_not_supported(driver):
    with pytest.raises(NotImplementedError):
        driver.get_config(sanitized=True)


def test_get_facts(driver, connection):
    facts = driver.get_facts()

    assert connection.requests[-1]["cmds"] == [
        "enable", "show version", "show hostname", "show interfaces",
    ]
    assert facts["vendor"] == "Arista"
    assert facts["model"] == "vEOS"
    assert facts["hostname"] == "veos01"
    assert facts["fqdn"] == "veos01.example.com"
    assert facts["os_version"] == "4.20.1F"
    assert facts["serial_number"] == "SSJ17371234"
    assert facts["interface_list"] == ["Ethernet1", "Loopback0", "Management1"]
    assert facts["uptime"] > 0


def test_get_interfaces(driver):
    interfaces = driver.get_interfaces()

    assert interfaces["Ethernet1"] == {
        "is_up": True,
        "is_enabled": True,
        "description": "uplink",
        "last_flapped": 1516135300.5,
        "speed": 1000.0,
        "mtu": 9214,
        "mac_address": "52:54:00:A5:E8:92",
    }
    assert interfaces["Management1"]["is_up"] is False
    assert interfaces["Management1"]["is_enabled"] is False
    assert interfaces["Loopback0"]["mac_address"] == ""
    assert interfaces["Loopback0"]["last_flapped"] == -1.0
