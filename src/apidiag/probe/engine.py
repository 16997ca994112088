# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe engine: schedules every endpoint and aggregates the ordered results."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..config import load_probe_settings
from ..http.client import Transport, create_default_transport
from ..models.endpoint import EndpointSpec
from ..models.options import ProbeOptions
from ..models.result import ProbeResult, RunSummary
from .retry import run_endpoint
from .scheduler import run_with_concurrency

logger = logging.getLogger(__name__)


class ProbeEngine:
    """Runs one bounded probe pass over a list of endpoints with an injected transport."""

    def __init__(self, transport: Transport, options: ProbeOptions | None = None):
        self.transport = transport
        self.options = options or ProbeOptions.from_settings(load_probe_settings())

    async def run(self, endpoints: Sequence[EndpointSpec]) -> list[ProbeResult]:
        logger.debug(
            "Probing %s endpoints (concurrency=%s, retries=%s, timeout=%sms)",
            len(endpoints),
            self.options.concurrency,
            self.options.retries,
            self.options.timeout_ms,
        )

        async def probe(endpoint: EndpointSpec) -> ProbeResult:
            return await run_endpoint(endpoint, self.options, self.transport)

        return await run_with_concurrency(endpoints, self.options.concurrency, probe)


def summarize(results: Sequence[ProbeResult]) -> RunSummary:
    return RunSummary.from_results(results)


async def run_diagnostics(
    endpoints: Sequence[EndpointSpec],
    options: ProbeOptions | None = None,
    transport: Transport | None = None,
) -> list[ProbeResult]:
    """
    Probe ``endpoints`` and return one result per endpoint, in input order.

    When no transport is injected a default httpx transport is created for this
    call and closed afterwards; an injected transport is left open for its owner.
    """
    settings = load_probe_settings()
    effective = options or ProbeOptions.from_settings(settings)
    if transport is not None:
        return await ProbeEngine(transport, effective).run(endpoints)

    owned = create_default_transport(settings)
    try:
        return await ProbeEngine(owned, effective).run(endpoints)
    finally:
        await owned.aclose()
