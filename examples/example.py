# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0
"""
This is a simple example of how to use the napalm-eapi driver against a switch
with eAPI enabled (``management api http-commands`` / ``no shutdown``).

Then uncomment the NAPALM API calls that you want to run and run this script:

python examples/example.py
"""

from napalm_eapi import EOSEapiDriver

# using rich to pretty print the output
# feel free to remove it if you don't want to install it
from rich import print_json

optional_args = {
    # "transport": "http",
    # "port": 8080,
    # "enable_password": "root",
    "verify": False
}
with EOSEapiDriver("veos01", "admin", "admin", optional_args=optional_args) as device:
    # print_json(data=device.get_config(retrieve="all", full=False, sanitized=False))
    # print_json(data=device.get_config(retrieve="running", full=True, sanitized=False))
    # print_json(data=device.get_interfaces())
    # print(device.is_alive())
    # print_json(data=device.cli(["show clock", "show hostname"]))
    # print_json(data=device.cli(["show version"], encoding="json"))
    print_json(data=device.get_facts())
