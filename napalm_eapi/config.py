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
Connection profiles loaded from an eapi.conf INI file.

Profiles live in sections named ``connection:<name>``. The file is found via
the EAPI_CONF environment variable, then an explicit filename, then
~/.eapi.conf and /mnt/flash/eapi.conf. A ``localhost`` profile using the unix
socket is always present.
"""

import configparser
import logging
import os
import pwd
import threading
from typing import Dict, List, Optional

from napalm_eapi.connection import USE_DEFAULT_PORT, connect
from napalm_eapi.exceptions import InvalidArgumentError, ProfileNotFoundError
from napalm_eapi.node import Node

CONFIG_SEARCH_PATH = ["~/.eapi.conf", "/mnt/flash/eapi.conf"]
SECTION_PREFIX = "connection:"


def expand_path(path: str) -> str:
    """Expand a leading ``~`` to the current user's home directory."""
    if not path.startswith("~"):
        return path
    try:
        home = pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        home = os.environ.get("HOME", "")
    return os.path.join(home, path[1:].lstrip("/"))


class EapiConfig(configparser.ConfigParser):
    """
    INI backed registry of connection profiles.
    """

    def __init__(self, filename: Optional[str] = None):
        super().__init__(interpolation=None)
        self.filename = filename
        self.autoload()

    def autoload(self):
        """Read the first profile file found, or start empty."""
        path = os.environ.get("EAPI_CONF") or self.filename
        search_path = [path] if path else CONFIG_SEARCH_PATH

        for filename in search_path:
            filename = expand_path(filename)
            if os.path.isfile(filename):
                self.filename = filename
                self.read(filename)
                return

        logging.debug("No eapi.conf found, using the default localhost profile")
        self._add_default_connection()

    def read(self, filename, encoding=None):
        """
        Load ``filename``. Sections without a host use the profile name.
        """
        try:
            super().read(filename, encoding=encoding)
        except configparser.Error as e:
            raise InvalidArgumentError(f"Cant read filename: {filename}, {e}") from e

        for name in self.sections():
            if name.startswith(SECTION_PREFIX) and not self.has_option(name, "host"):
                self.set(name, "host", name[len(SECTION_PREFIX):])
        self._add_default_connection()
        return [filename]

    def load(self, filename: str):
        self.filename = filename
        self.reload()

    def reload(self):
        """Drop every profile and search for the profile file again."""
        for name in self.sections():
            self.remove_section(name)
        self.autoload()

    def connections(self) -> List[str]:
        """Names of the configured profiles."""
        return [
            name[len(SECTION_PREFIX):]
            for name in self.sections()
            if name.startswith(SECTION_PREFIX)
        ]

    def get_connection(self, name: str) -> Optional[Dict[str, str]]:
        section = SECTION_PREFIX + name
        if not self.has_section(section):
            return None
        return dict(self.items(section))

    def add_connection(self, name: str, **options) -> Dict[str, str]:
        section = SECTION_PREFIX + name
        if not self.has_section(section):
            self.add_section(section)
        for key, value in options.items():
            self.set(section, key, str(value))
        return dict(self.items(section))

    def connect_to(self, name: str) -> Node:
        """
        Build a Node for profile ``name``, with auto refresh on.
        """
        profile = self.get_connection(name)
        if profile is None:
            raise ProfileNotFoundError(
                f"Connection profile not found in config: {name}"
            )

        port = USE_DEFAULT_PORT
        if profile.get("port"):
            try:
                port = int(profile["port"])
            except ValueError as e:
                raise InvalidArgumentError(
                    f"Invalid port for profile {name}: {profile['port']}"
                ) from e

        connection = connect(
            transport=profile.get("transport"),
            host=profile.get("host"),
            username=profile.get("username"),
            password=profile.get("password"),
            port=port,
        )
        node = Node(connection, auto_refresh=True)
        node.enable_authentication(profile.get("enablepwd", ""))
        return node

    def _add_default_connection(self):
        if self.get_connection("localhost") is None:
            self.add_connection("localhost", transport="socket")


_config_global: Optional[EapiConfig] = None
_config_lock = threading.Lock()


def get_config() -> EapiConfig:
    """The process wide profile registry, loaded on first use."""
    global _config_global
    if _config_global is None:
        with _config_lock:
            if _config_global is None:
                _config_global = EapiConfig()
    return _config_global


def load_config(filename: str):
    """Reload the global registry from ``filename``."""
    global _config_global
    with _config_lock:
        if _config_global is None:
            _config_global = EapiConfig(filename)
        else:
            _config_global.load(filename)


def connections() -> List[str]:
    return get_config().connections()


def config_for(name: str) -> Optional[Dict[str, str]]:
    return get_config().get_connection(name)


def connect_to(name: str) -> Node:
    return get_config().connect_to(name)
