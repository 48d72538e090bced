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
Exceptions raised by the eAPI client.

Every exception derives from EapiError and from the closest NAPALM (or builtin)
exception, so code written against NAPALM drivers catches them unchanged.
"""

from napalm.base.exceptions import (
    CommandErrorException,
    CommandTimeoutException,
    ConnectionClosedException,
    ConnectionException,
)


class EapiError(Exception):
    """Base class for all eAPI client errors."""


class InvalidArgumentError(EapiError, ValueError):
    """Bad encoding, regex, transport, command or handle capacity."""


class InvalidStateError(EapiError, ConnectionClosedException):
    """Operation on a closed handle or a handle without a node."""


class TransportError(EapiError, ConnectionException):
    """
    The request could not be carried to the device or the reply was unusable.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class TransportTimeoutError(TransportError, CommandTimeoutException):
    pass


class ResponseDecodeError(TransportError):
    pass


class ResponseMismatchError(TransportError):
    pass


class RemoteError(EapiError, CommandErrorException):
    """
    The device answered with a JSON-RPC error object.
    """

    def __init__(self, code, message, data=None):
        super().__init__(f"JSON Error({code}): {message}")
        self.code = code
        self.message = message
        self.data = data


class ProfileNotFoundError(EapiError, LookupError):
    pass


class SectionNotFoundError(EapiError, LookupError):
    pass
