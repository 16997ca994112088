# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport exports."""

from .adapters import CallableTransport, StubTransport
from .client import Transport, create_default_transport
from .headers import merge_headers
from .httpx_client import HttpxTransport
from .models import Headers, HttpRequest, HttpResponse

__all__ = [
    "CallableTransport",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "StubTransport",
    "Transport",
    "create_default_transport",
    "merge_headers",
]
