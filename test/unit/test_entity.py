# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

"""Tests for BaseEntity."""
import pytest

from napalm_eapi.entity import BaseEntity
from napalm_eapi.exceptions import RemoteError, SectionNotFoundError


@pytest.fixture
def entity(node):
    return BaseEntity(node)


def test_config_is_running_config(entity, node):
    assert entity.config == node.running_config


def test_get_block(entity):
    block = entity.get_block("interface Ethernet1")
    assert block == (
        "interface Ethernet1\n"
        "   description uplink\n"
        "   mtu 9214\n"
        "   no shutdown\n"
    )


def test_get_block_is_anchored(entity):
    with pytest.raises(SectionNotFoundError):
        entity.get_block("interface Ethernet")


@pytest.mark.parametrize("kwargs,expected", [
    ({}, "ip routing"),
    ({"value": "vrf red"}, "ip routing vrf red"),
    ({"enable": False}, "no ip routing"),
    ({"default": True}, "default ip routing"),
    ({"value": "vrf red", "default": True, "enable": False}, "default ip routing vrf red"),
])
def test_command_builder(entity, kwargs, expected):
    assert entity.command_builder("ip routing", **kwargs) == expected


def test_configure_interface(entity, connection):
    assert entity.configure_interface("Ethernet1", "description uplink", "no shutdown")
    assert connection.requests[-1]["cmds"] == [
        "enable",
        "configure terminal",
        "interface Ethernet1",
        "description uplink",
        "no shutdown",
    ]


def test_error_reflects_connection(entity, connection):
    assert entity.error is None
    connection.fail_with = RemoteError(1002, "invalid command")
    assert entity.configure("bogus") is False
    assert entity.error is connection.fail_with
