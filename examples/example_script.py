# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

# Uses a profile from ~/.eapi.conf (or $EAPI_CONF), e.g.
#
#   [connection:veos01]
#   host = 192.168.1.16
#   username = admin
#   password = admin
#   transport = https

import napalm_eapi
from napalm_eapi.entity import BaseEntity
from napalm_eapi.types import ShowHostname, ShowVersion

print(napalm_eapi.connections())
node = napalm_eapi.connect_to("veos01")

print(node.running_config)
print(node.get_section(r"(?m)^interface Management1$"))

version = ShowVersion()
hostname = ShowHostname()
handle = node.get_handle("json")
handle.add_command(version)
handle.add_command(hostname)
handle.call()
handle.close()
print(f"{hostname.hostname}: {version.model_name} {version.version}")

#print(node.enable(["show clock", "show ip route"]))
#print(node.config("hostname veos01-lab"))
#print(BaseEntity(node).configure_interface("Ethernet1", "description uplink"))

node.connection.close()
