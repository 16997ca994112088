# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import asyncio
import errno
import socket
from enum import Enum

import httpx

TIMEOUT_MESSAGE = "The operation was aborted due to timeout"
MISSING_URL_MESSAGE = "Missing URL"


class ErrorKind(str, Enum):
    TIMEOUT = "TIMEOUT"
    DNS = "DNS"
    CONNECTION = "CONNECTION"
    NETWORK = "NETWORK"
    CONFIGURATION = "CONFIGURATION"


class ConfigError(Exception):
    """Raised when the endpoint configuration cannot be loaded."""


_CONNECTION_ERRNOS = {errno.ECONNREFUSED, errno.ECONNRESET, errno.ECONNABORTED}


def _iter_causes(exc: BaseException):
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorKind:
    """
    Map asyncio/socket/httpx exceptions to ErrorKind.

    httpx wraps the underlying OS error, so the cause chain is walked before
    falling back to the httpx exception type.
    """
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError, httpx.TimeoutException)):
        return ErrorKind.TIMEOUT

    for cause in _iter_causes(exc):
        if isinstance(cause, (socket.gaierror, socket.herror)):
            return ErrorKind.DNS
        if isinstance(cause, (ConnectionRefusedError, ConnectionResetError, ConnectionAbortedError)):
            return ErrorKind.CONNECTION
        if isinstance(cause, OSError) and cause.errno in _CONNECTION_ERRNOS:
            return ErrorKind.CONNECTION

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.ReadError, httpx.WriteError)):
        return ErrorKind.CONNECTION

    return ErrorKind.NETWORK


def describe_exception(exc: BaseException) -> str:
    """Return a non-empty message for an exception (some httpx errors stringify to '')."""
    if isinstance(exc, asyncio.TimeoutError):
        return TIMEOUT_MESSAGE
    message = str(exc).strip()
    return message or exc.__class__.__name__


__all__ = [
    "ConfigError",
    "ErrorKind",
    "MISSING_URL_MESSAGE",
    "TIMEOUT_MESSAGE",
    "categorize_exception",
    "describe_exception",
]
