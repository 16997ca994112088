# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Adapters to plug plain fetch functions and test doubles into the Transport protocol."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from .client import Transport
from .models import HttpRequest, HttpResponse

FetchFunction = Callable[..., Awaitable[Any]]


class CallableTransport(Transport):
    """
    Adapter for a bare ``async fetch(url, *, method, headers, body)`` function.

    The function may return an HttpResponse, or any object exposing ``status`` /
    ``status_code`` together with ``text`` (string, or coroutine function returning one).
    """

    def __init__(self, fetch: FetchFunction):
        self._fetch = fetch

    async def request(self, request: HttpRequest) -> HttpResponse:
        result = await self._fetch(
            request.url,
            method=request.method,
            headers=request.headers,
            body=request.body,
        )
        if isinstance(result, HttpResponse):
            return result

        status = getattr(result, "status_code", None)
        if status is None:
            status = getattr(result, "status", None)
        if status is None:
            raise TypeError(f"fetch returned {type(result).__name__} without a status")

        text = getattr(result, "text", None)
        if callable(text):
            return HttpResponse(status_code=int(status), reader=text)
        return HttpResponse(status_code=int(status), text="" if text is None else str(text))

    async def aclose(self) -> None:
        return None


class StubTransport(Transport):
    """Deterministic, programmable Transport for tests."""

    def __init__(self, responses: dict[str, Any] | None = None, delays: dict[str, float] | None = None):
        self._responses: dict[str, list[Any]] = {url: [value] for url, value in (responses or {}).items()}
        self._delays = dict(delays or {})
        self.requests: list[HttpRequest] = []

    def add(self, url: str, *outcomes: Any, delay: float | None = None) -> None:
        """Queue outcomes (HttpResponse or exception) for a URL; the last one repeats."""
        self._responses[url] = list(outcomes)
        if delay is not None:
            self._delays[url] = delay

    async def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        delay = self._delays.get(request.url)
        if delay:
            await asyncio.sleep(delay)
        queue = self._responses.get(request.url)
        if not queue:
            raise ConnectionError(f"No stubbed response configured for {request.url}")
        outcome = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return HttpResponse(
            status_code=outcome.status_code,
            headers=dict(outcome.headers),
            text=outcome.text,
            url=outcome.url or request.url,
            reader=outcome.reader,
        )

    async def aclose(self) -> None:
        return None
