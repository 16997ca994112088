# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single probe attempt: one request bounded by a timeout."""

from __future__ import annotations

import asyncio
import json
import time

from ..errors import TIMEOUT_MESSAGE, ErrorKind, categorize_exception, describe_exception
from ..http.client import Transport
from ..http.headers import merge_headers
from ..http.models import HttpRequest
from ..models.endpoint import EndpointSpec
from ..models.outcome import ProbeFailure, ProbeOutcome, ProbeSuccess

SNIPPET_MAX_CHARS = 600
TRUNCATION_MARKER = "…[truncated]"


def truncate_snippet(text: str | None, limit: int = SNIPPET_MAX_CHARS) -> str:
    if not text:
        return ""
    if len(text) > limit:
        return text[:limit] + TRUNCATION_MARKER
    return text


def build_request(endpoint: EndpointSpec, user_agent: str, timeout_ms: int | None = None) -> HttpRequest:
    """Build the outbound request; endpoint headers override the default User-Agent."""
    body = json.dumps(endpoint.body) if endpoint.body is not None else None
    return HttpRequest(
        url=endpoint.url or "",
        method=endpoint.method,
        headers=merge_headers({"User-Agent": user_agent}, endpoint.headers),
        body=body,
        timeout=timeout_ms / 1000.0 if timeout_ms is not None else None,
    )


async def _exchange(transport: Transport, request: HttpRequest) -> ProbeSuccess:
    started = time.perf_counter()
    response = await transport.request(request)
    latency_ms = round((time.perf_counter() - started) * 1000)
    text = await response.read_text()
    return ProbeSuccess(
        status=response.status_code,
        latency_ms=latency_ms,
        body_snippet=truncate_snippet(text),
    )


async def attempt(
    endpoint: EndpointSpec,
    timeout_ms: int,
    user_agent: str,
    transport: Transport,
) -> ProbeOutcome:
    """
    Run one attempt against ``endpoint``.

    The timeout covers the request and the body read; on expiry only this attempt's
    in-flight exchange is cancelled. Transport errors are returned as ProbeFailure,
    never raised; a body that cannot be JSON-encoded is a CONFIGURATION failure.
    """
    try:
        request = build_request(endpoint, user_agent, timeout_ms)
    except (TypeError, ValueError) as exc:
        return ProbeFailure(
            error_kind=ErrorKind.CONFIGURATION,
            error_message=f"Invalid request body: {exc}",
            error_type=type(exc).__name__,
        )

    try:
        return await asyncio.wait_for(_exchange(transport, request), timeout=timeout_ms / 1000.0)
    except asyncio.TimeoutError:
        return ProbeFailure(error_kind=ErrorKind.TIMEOUT, error_message=TIMEOUT_MESSAGE, error_type="TimeoutError")
    except Exception as exc:  # noqa: BLE001
        return ProbeFailure(
            error_kind=categorize_exception(exc),
            error_message=describe_exception(exc),
            error_type=type(exc).__name__,
        )
