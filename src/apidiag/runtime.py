# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level apidiag facade for probe runs."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from .config import ProbeSettings, load_probe_settings
from .http.client import Transport, create_default_transport
from .models import EndpointSpec, ProbeOptions, ProbeResult
from .probe.engine import ProbeEngine


class ApiDiagnosis:
    """
    Convenience wrapper that wires one transport and one set of options into the engine.

    The transport is owned by this object when it creates it; an injected transport
    is still closed by ``close()``, mirroring the way the CLI hands over ownership.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        settings: ProbeSettings | None = None,
        options: ProbeOptions | None = None,
    ):
        self.settings = settings or load_probe_settings()
        self.options = options or ProbeOptions.from_settings(self.settings)
        self.transport = transport or create_default_transport(self.settings)
        self.engine = ProbeEngine(self.transport, self.options)

    async def run(self, endpoints: Sequence[EndpointSpec]) -> list[ProbeResult]:
        return await self.engine.run(endpoints)

    async def aclose(self) -> None:
        await self.transport.aclose()

    def run_sync(self, endpoints: Sequence[EndpointSpec]) -> list[ProbeResult]:
        """Run a full pass and close the transport on the same event loop."""

        async def _run() -> list[ProbeResult]:
            try:
                return await self.run(endpoints)
            finally:
                await self.aclose()

        return asyncio.run(_run())

    async def __aenter__(self) -> ApiDiagnosis:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()
