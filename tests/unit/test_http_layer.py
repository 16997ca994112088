# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio
from types import SimpleNamespace

import httpx
import pytest

from apidiag.config import ProbeSettings
from apidiag.http import (
    CallableTransport,
    HttpRequest,
    HttpResponse,
    HttpxTransport,
    StubTransport,
    create_default_transport,
    merge_headers,
)
from apidiag.models import EndpointSpec, ProbeOptions
from apidiag.probe.engine import run_diagnostics


def test_merge_headers_overrides_case_insensitively():
    merged = merge_headers({"User-Agent": "default"}, {"user-agent": "custom", "X-Id": 7})
    assert merged == {"user-agent": "custom", "X-Id": "7"}
    assert merge_headers({"User-Agent": "default"}, None) == {"User-Agent": "default"}


def test_http_response_read_text_prefers_preloaded_text():
    calls = []

    async def reader():
        calls.append(1)
        return "from reader"

    assert asyncio.run(HttpResponse(status_code=200, text="preloaded", reader=reader).read_text()) == "preloaded"
    streamed = HttpResponse(status_code=200, reader=reader)
    assert asyncio.run(streamed.read_text()) == "from reader"
    assert asyncio.run(streamed.read_text()) == "from reader"
    assert calls == [1]
    assert asyncio.run(HttpResponse(status_code=204).read_text()) == ""


def test_httpx_transport_streams_response():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, text="created", headers={"X-Test": "1"})

    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        transport = HttpxTransport(ProbeSettings(), client=client)
        try:
            response = await transport.request(
                HttpRequest(url="http://example/items", method="POST", headers={"User-Agent": "UA/1.0"}, body='{"a": 1}')
            )
            text = await response.read_text()
        finally:
            await transport.aclose()
        return response, text

    response, text = asyncio.run(scenario())
    assert response.status_code == 201
    assert text == "created"
    assert response.headers["x-test"] == "1"
    assert seen[0].method == "POST"
    assert seen[0].headers["User-Agent"] == "UA/1.0"
    assert seen[0].content == b'{"a": 1}'


def test_httpx_transport_raises_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    async def scenario():
        transport = HttpxTransport(ProbeSettings(), client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        try:
            await transport.request(HttpRequest(url="http://example"))
        finally:
            await transport.aclose()

    with pytest.raises(httpx.ConnectError):
        asyncio.run(scenario())


def test_httpx_transport_end_to_end_through_engine():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/missing":
            return httpx.Response(404, text="no such thing")
        return httpx.Response(200, json={"ok": True})

    async def scenario():
        transport = HttpxTransport(ProbeSettings(), client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        try:
            return await run_diagnostics(
                [EndpointSpec(url="http://example/ok"), EndpointSpec(url="http://example/missing")],
                ProbeOptions(retries=0),
                transport,
            )
        finally:
            await transport.aclose()

    ok, missing = asyncio.run(scenario())
    assert ok.ok is True
    assert ok.text_snippet == '{"ok":true}' or ok.text_snippet == '{"ok": true}'
    assert missing.ok is False
    assert missing.diagnosis.issue == "Client Error (4xx)"


def test_create_default_transport_uses_settings():
    transport = create_default_transport(ProbeSettings(timeout_ms=2500, verify_ssl=False))
    try:
        assert isinstance(transport, HttpxTransport)
        assert transport.settings.timeout_ms == 2500
    finally:
        asyncio.run(transport.aclose())


def test_callable_transport_adapts_fetch_functions():
    calls = []

    async def fetch(url, *, method, headers, body):
        calls.append((url, method, headers, body))

        async def text():
            return "body text"

        return SimpleNamespace(status=202, text=text)

    transport = CallableTransport(fetch)
    response = asyncio.run(transport.request(HttpRequest(url="http://x", method="PATCH", body="{}")))
    assert response.status_code == 202
    assert asyncio.run(response.read_text()) == "body text"
    assert calls == [("http://x", "PATCH", {}, "{}")]


def test_callable_transport_accepts_plain_text_and_http_response():
    async def fetch_plain(url, **_kwargs):
        return SimpleNamespace(status_code=200, text="plain")

    async def fetch_native(url, **_kwargs):
        return HttpResponse(status_code=418, text="teapot")

    plain = asyncio.run(CallableTransport(fetch_plain).request(HttpRequest(url="http://x")))
    native = asyncio.run(CallableTransport(fetch_native).request(HttpRequest(url="http://x")))
    assert plain.text == "plain"
    assert native.status_code == 418


def test_callable_transport_rejects_statusless_results():
    async def fetch(url, **_kwargs):
        return object()

    with pytest.raises(TypeError):
        asyncio.run(CallableTransport(fetch).request(HttpRequest(url="http://x")))


def test_stub_transport_sequences_and_unconfigured_urls():
    transport = StubTransport({"http://x/a": HttpResponse(status_code=200, text="a")})
    transport.add("http://x/b", OSError("first"), HttpResponse(status_code=204))

    async def scenario():
        first = await transport.request(HttpRequest(url="http://x/a"))
        with pytest.raises(OSError):
            await transport.request(HttpRequest(url="http://x/b"))
        second = await transport.request(HttpRequest(url="http://x/b"))
        third = await transport.request(HttpRequest(url="http://x/b"))
        with pytest.raises(ConnectionError):
            await transport.request(HttpRequest(url="http://x/unknown"))
        return first, second, third

    first, second, third = asyncio.run(scenario())
    assert first.text == "a"
    assert second.status_code == 204
    assert third.status_code == 204
    assert len(transport.requests) == 5


def test_option_timeout_overrides_settings_timeout():
    timeouts = []

    async def handler(request: httpx.Request) -> httpx.Response:
        timeouts.append(request.extensions["timeout"]["read"])
        await asyncio.sleep(0.05)
        return httpx.Response(200, text="slow but fine")

    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), timeout=0.01)
        transport = HttpxTransport(ProbeSettings(timeout_ms=10), client=client)
        try:
            return await run_diagnostics(
                [EndpointSpec(url="http://example/slow")],
                ProbeOptions(retries=0, timeout_ms=5000),
                transport,
            )
        finally:
            await transport.aclose()

    (result,) = asyncio.run(scenario())
    assert timeouts == [5.0]
    assert result.ok is True
    assert result.status == 200


def test_httpx_transport_falls_back_to_settings_timeout():
    timeouts = []

    def handler(request: httpx.Request) -> httpx.Response:
        timeouts.append(request.extensions["timeout"]["read"])
        return httpx.Response(204)

    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        transport = HttpxTransport(ProbeSettings(timeout_ms=2500), client=client)
        try:
            await transport.request(HttpRequest(url="http://example"))
        finally:
            await transport.aclose()

    asyncio.run(scenario())
    assert timeouts == [2.5]
