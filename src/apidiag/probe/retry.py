# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Retry controller producing one finalized ProbeResult per endpoint."""

from __future__ import annotations

import logging
from asyncio import sleep

from ..diagnosis.classifier import classify
from ..errors import MISSING_URL_MESSAGE, ErrorKind
from ..http.client import Transport
from ..models.endpoint import EndpointSpec
from ..models.options import ProbeOptions
from ..models.outcome import ProbeFailure, ProbeSuccess
from ..models.result import ProbeResult, now_iso
from .executor import attempt

logger = logging.getLogger(__name__)

BACKOFF_STEP_SECONDS = 0.5


def backoff_delay(attempt_number: int) -> float:
    """Fixed linear backoff: 500ms times the number of the attempt that just failed."""
    return BACKOFF_STEP_SECONDS * attempt_number


def is_ok(status: int, expected_status: int | None) -> bool:
    if not 200 <= status < 300:
        return False
    return expected_status is None or status == expected_status


def _missing_url_result(endpoint: EndpointSpec) -> ProbeResult:
    failure = ProbeFailure(error_kind=ErrorKind.CONFIGURATION, error_message=MISSING_URL_MESSAGE)
    return ProbeResult(
        name=endpoint.display_name,
        method=endpoint.method,
        url=None,
        ok=False,
        diagnosis=classify(failure),
        attempt_count=0,
        error=failure.error_message,
        error_type=failure.error_kind.value,
        expected_status=endpoint.expected_status,
        timestamp=now_iso(),
    )


def _success_result(endpoint: EndpointSpec, success: ProbeSuccess, attempt_count: int) -> ProbeResult:
    return ProbeResult(
        name=endpoint.display_name,
        method=endpoint.method,
        url=endpoint.url,
        ok=is_ok(success.status, endpoint.expected_status),
        diagnosis=classify(success),
        attempt_count=attempt_count,
        status=success.status,
        latency_ms=success.latency_ms,
        text_snippet=success.body_snippet,
        expected_status=endpoint.expected_status,
        timestamp=now_iso(),
    )


def _failure_result(endpoint: EndpointSpec, failure: ProbeFailure, attempt_count: int) -> ProbeResult:
    return ProbeResult(
        name=endpoint.display_name,
        method=endpoint.method,
        url=endpoint.url,
        ok=False,
        diagnosis=classify(failure),
        attempt_count=attempt_count,
        error=failure.error_message,
        error_type=failure.error_type or failure.error_kind.value,
        expected_status=endpoint.expected_status,
        timestamp=now_iso(),
    )


async def run_endpoint(endpoint: EndpointSpec, options: ProbeOptions, transport: Transport) -> ProbeResult:
    """
    Probe one endpoint until a response arrives or attempts run out.

    Any received response ends the loop, whatever its status; only transport
    failures are retried. The result reflects the last failure on exhaustion.
    """
    if not endpoint.url:
        logger.warning("Endpoint %s has no URL; skipping", endpoint.display_name)
        return _missing_url_result(endpoint)

    max_attempts = options.max_attempts
    attempt_number = 1
    while True:
        outcome = await attempt(endpoint, options.timeout_ms, options.user_agent, transport)
        if isinstance(outcome, ProbeSuccess):
            logger.debug(
                "%s %s -> %s in %sms (attempt %s)",
                endpoint.method,
                endpoint.url,
                outcome.status,
                outcome.latency_ms,
                attempt_number,
            )
            return _success_result(endpoint, outcome, attempt_number)

        logger.debug(
            "%s %s failed on attempt %s/%s: %s",
            endpoint.method,
            endpoint.url,
            attempt_number,
            max_attempts,
            outcome.error_message,
        )
        if attempt_number >= max_attempts:
            logger.info("%s %s failed after %s attempts: %s", endpoint.method, endpoint.url, attempt_number, outcome.error_message)
            return _failure_result(endpoint, outcome, attempt_number)

        await sleep(backoff_delay(attempt_number))
        attempt_number += 1
