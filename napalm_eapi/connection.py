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
Transports carrying eAPI requests to a device.

Each EapiConnection subclass sends a serialized runCmds envelope over one of the
supported transports (unix socket, local HTTP, HTTP, HTTPS) and returns the
decoded JSONRPCResponse. Failures are raised and also latched in ``error``.
"""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from napalm_eapi.envelope import (
    JSONRPCResponse,
    build_json_request,
    decode_response,
    redact_request,
    request_id,
)
from napalm_eapi.exceptions import (
    EapiError,
    InvalidArgumentError,
    RemoteError,
    TransportError,
    TransportTimeoutError,
)

DEFAULT_UNIX_SOCKET = "/var/run/command-api.sock"
COMMAND_API_PATH = "/command-api"

USE_DEFAULT_PORT = -1
DEFAULT_HTTP_LOCAL_PORT = 8080
DEFAULT_HTTP_PORT = 80
DEFAULT_HTTPS_PORT = 443

DEFAULT_TIMEOUT = 60
MAX_TIMEOUT = 65535


class EapiConnection(object):
    """
    Base object for the eAPI transports. Not meant to be instantiated directly.
    """

    transport = None
    scheme = "http"
    default_port = None

    def __init__(
        self,
        host: str = "localhost",
        username: Optional[str] = None,
        password: Optional[str] = None,
        port: Optional[int] = None,
        timeout: Optional[int] = DEFAULT_TIMEOUT,
    ):
        """Constructor."""
        self.host = host
        if port is None or port == USE_DEFAULT_PORT:
            port = self.default_port
        self.port = port
        self.path = COMMAND_API_PATH
        self.username = None
        self.password = None
        self.error = None
        self.timeout = DEFAULT_TIMEOUT
        self.set_timeout(timeout)

        self.jsonrpc_session = self._new_jsonrpc_client()

    def authentication(self, username: str, password: str):
        """
        Configure the username and password used for HTTP Basic authentication.
        """
        self.username = (username or "").replace("\n", "")
        self.password = (password or "").replace("\n", "")

    @property
    def url(self) -> str:
        userinfo = ""
        if self.username is not None:
            userinfo = "{}:{}@".format(
                quote(self.username, safe=""), quote(self.password, safe="")
            )
        return f"{self.scheme}://{userinfo}{self.host}:{self.port}{self.path}"

    def set_timeout(self, timeout: Optional[int]):
        """
        Set the total request timeout in seconds. Values outside
        0..65535 fall back to the default of 60 seconds; 0 disables the
        timeout.
        """
        try:
            value = int(timeout)
        except (TypeError, ValueError):
            value = DEFAULT_TIMEOUT
        if value < 0 or value > MAX_TIMEOUT:
            value = DEFAULT_TIMEOUT
        self.timeout = value

    def set_error(self, err: Exception):
        self.error = err

    def clear_error(self):
        self.error = None

    def execute(self, commands: list, encoding) -> JSONRPCResponse:
        """
        Send the list of commands to the device and return the decoded response.

        ``commands`` must already carry the enable prefix if one is wanted;
        ``encoding`` is either 'json' or 'text'.
        """
        self.clear_error()
        try:
            data = build_json_request(commands, encoding, request_id())
        except EapiError as e:
            self.set_error(e)
            raise
        return self.send(data)

    def send(self, data: bytes) -> JSONRPCResponse:
        """
        Post the serialized request and decode the reply. Anything other than
        HTTP 200 or a JSON-RPC error object in the reply is raised.
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        logging.debug(
            f"Sending eAPI request to {self.host} over {self.transport}: "
            f"{redact_request(data)}"
        )
        try:
            response = self.jsonrpc_session.post(
                self.url,
                content=data,
                headers=headers,
                timeout=self.timeout or None,
                auth=self._basic_auth(),
            )
        except httpx.TimeoutException as e:
            raise self._latch(
                TransportTimeoutError(f"Request to {self.host} timed out: {e}")
            ) from e
        except httpx.HTTPError as e:
            raise self._latch(
                TransportError(f"Request to {self.host} failed: {e}")
            ) from e

        if response.status_code != httpx.codes.OK:
            raise self._latch(
                TransportError(
                    f"Http error: {response.status_code} {response.reason_phrase}",
                    status_code=response.status_code,
                )
            )

        try:
            envelope = decode_response(response.content)
        except EapiError as e:
            raise self._latch(e)

        if envelope.error is not None:
            raise self._latch(
                RemoteError(
                    envelope.error.code, envelope.error.message, envelope.error.data
                )
            )
        return envelope

    def close(self):
        """Cleanup the HTTP Client"""
        self.jsonrpc_session.close()

    def _basic_auth(self):
        if self.username is None:
            return None
        return (self.username, self.password)

    def _latch(self, err: Exception) -> Exception:
        logging.error(f"eAPI request to {self.host} failed: {err}")
        self.set_error(err)
        return err

    def _new_jsonrpc_client(self, transport: Optional[httpx.BaseTransport] = None):
        """
        Create the HTTP client used to post requests. ``transport`` replaces
        the network transport, which is how tests plug in httpx.MockTransport.
        """
        return httpx.Client(transport=transport)


class SocketEapiConnection(EapiConnection):
    """
    eAPI over the local unix domain socket. The URL authority is ignored by the
    server, so requests are posted to a fixed localhost URL.
    """

    transport = "socket"

    def __init__(self, host="localhost", username=None, password=None, port=None,
                 timeout=DEFAULT_TIMEOUT, socket_path=DEFAULT_UNIX_SOCKET):
        self.socket_path = socket_path
        super().__init__("localhost", timeout=timeout)

    @property
    def url(self) -> str:
        return f"http://localhost{self.path}"

    def _new_jsonrpc_client(self, transport=None):
        if transport is None:
            transport = httpx.HTTPTransport(uds=self.socket_path)
        return httpx.Client(transport=transport)


class HttpLocalEapiConnection(EapiConnection):
    """eAPI over plain HTTP to localhost, without authentication."""

    transport = "http_local"
    default_port = DEFAULT_HTTP_LOCAL_PORT

    def __init__(self, host="localhost", username=None, password=None, port=None,
                 timeout=DEFAULT_TIMEOUT):
        super().__init__("localhost", port=port, timeout=timeout)


class HttpEapiConnection(EapiConnection):
    """eAPI over HTTP with Basic authentication."""

    transport = "http"
    default_port = DEFAULT_HTTP_PORT

    def __init__(self, host="localhost", username="admin", password="", port=None,
                 timeout=DEFAULT_TIMEOUT):
        super().__init__(host, port=port, timeout=timeout)
        self.authentication(username, password)


class HttpsEapiConnection(EapiConnection):
    """
    eAPI over HTTPS with Basic authentication. Server certificates are not
    verified unless enable_certificate_verification() is called.
    """

    transport = "https"
    scheme = "https"
    default_port = DEFAULT_HTTPS_PORT

    def __init__(self, host="localhost", username="admin", password="", port=None,
                 timeout=DEFAULT_TIMEOUT, verify=False):
        self.enforce_verification = verify
        super().__init__(host, port=port, timeout=timeout)
        self.authentication(username, password)

        if self.port != DEFAULT_HTTPS_PORT:
            logging.warning(
                f"Non-default eAPI HTTPS port configured ({self.port}), typically only 443(default) is used"
            )
        if not self.enforce_verification:
            logging.warning(
                f"Certificate verification is disabled for {self.host}, "
                + "any server certificate will be accepted"
            )

    def enable_certificate_verification(self):
        self._set_verification(True)

    def disable_certificate_verification(self):
        self._set_verification(False)

    def _set_verification(self, enforce: bool):
        if enforce == self.enforce_verification:
            return
        self.enforce_verification = enforce
        self.jsonrpc_session.close()
        self.jsonrpc_session = self._new_jsonrpc_client()

    def _new_jsonrpc_client(self, transport=None):
        return httpx.Client(transport=transport, verify=self.enforce_verification)


TRANSPORTS = {
    "socket": SocketEapiConnection,
    "http_local": HttpLocalEapiConnection,
    "http": HttpEapiConnection,
    "https": HttpsEapiConnection,
}


def connect(
    transport: Optional[str] = "https",
    host: Optional[str] = "localhost",
    username: Optional[str] = "admin",
    password: Optional[str] = "",
    port: Optional[int] = None,
    timeout: Optional[int] = DEFAULT_TIMEOUT,
) -> EapiConnection:
    """
    Build the connection for ``transport``. Empty values fall back to
    https, localhost and admin.
    """
    transport = transport or "https"
    host = host or "localhost"
    username = username or "admin"

    cls = TRANSPORTS.get(transport)
    if cls is None:
        raise InvalidArgumentError(f"Invalid transport specified: {transport}")
    return cls(host, username, password or "", port, timeout)
