# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Transport implementation."""

from __future__ import annotations

import httpx

from ..config import ProbeSettings, load_probe_settings
from .client import Transport
from .models import HttpRequest, HttpResponse


class HttpxTransport(Transport):
    """Asynchronous httpx client wrapper that streams bodies so status is known first."""

    def __init__(self, settings: ProbeSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or load_probe_settings()
        self._client = client or httpx.AsyncClient(
            follow_redirects=self.settings.follow_redirects,
            timeout=self.settings.timeout_ms / 1000.0,
            verify=self.settings.verify_ssl,
        )

    async def request(self, request: HttpRequest) -> HttpResponse:
        timeout = request.timeout
        if timeout is None:
            timeout = self.settings.timeout_ms / 1000.0

        http_request = self._client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
            timeout=timeout,
        )
        resp = await self._client.send(http_request, stream=True)

        async def read_body() -> str:
            try:
                await resp.aread()
            finally:
                await resp.aclose()
            return resp.text

        return HttpResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            url=str(resp.url),
            reader=read_body,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
