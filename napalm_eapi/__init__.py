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

"""eAPI client and NAPALM driver for JSON-RPC enabled switches."""

from napalm_eapi.config import (
    EapiConfig,
    config_for,
    connect_to,
    connections,
    load_config,
)
from napalm_eapi.connection import connect
from napalm_eapi.eos import EOSEapiDriver
from napalm_eapi.handle import EapiReqHandle
from napalm_eapi.node import Node

__all__ = (
    "EOSEapiDriver",
    "EapiConfig",
    "EapiReqHandle",
    "Node",
    "config_for",
    "connect",
    "connect_to",
    "connections",
    "load_config",
)
