# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Map a terminal probe outcome to a Diagnosis.

Transport failures are matched on their message first (so messages produced by
other clients, e.g. ``ENOTFOUND host``, classify the same way) and then on the
typed ErrorKind. Responses are classified by status and latency.
"""

from __future__ import annotations

import re

from ..errors import ErrorKind
from ..models.diagnosis import Diagnosis, Severity
from ..models.outcome import ProbeFailure, ProbeOutcome, ProbeSuccess

SLOW_RESPONSE_MS = 1500

TIMEOUT = Diagnosis(
    issue="Timeout",
    severity=Severity.HIGH,
    recommendation=(
        "Increase API timeout, add retries/backoff, and profile server latency. "
        "Check slow DB queries or external dependencies."
    ),
)
DNS_FAILURE = Diagnosis(
    issue="DNS/Host Resolution Failure",
    severity=Severity.HIGH,
    recommendation=(
        "Verify DNS records, VPC/peering rules, and environment variables for base URL. "
        "Try resolving host from same network."
    ),
)
CONNECTION_FAILURE = Diagnosis(
    issue="Connection Refused/Reset",
    severity=Severity.HIGH,
    recommendation="Check service is listening, security groups, firewalls, mTLS requirements, and upstream rate-limits.",
)
NETWORK_ERROR = Diagnosis(
    issue="Network/Client Error",
    severity=Severity.HIGH,
    recommendation="Inspect client network, TLS versions/ciphers, proxies, and any corporate egress rules.",
)
SLOW_RESPONSE = Diagnosis(
    issue="Slow Response",
    severity=Severity.MEDIUM,
    recommendation=(
        "Add server-side tracing (e.g., OpenTelemetry). Cache hot paths, index DB queries, "
        "or paginate large payloads."
    ),
)
HEALTHY = Diagnosis(issue="OK", severity=Severity.LOW, recommendation="No action required.")
SERVER_ERROR = Diagnosis(
    issue="Server Error (5xx)",
    severity=Severity.HIGH,
    recommendation=(
        "Inspect server logs, Sentry/Apm traces. Handle edge cases, add circuit breaker, "
        "validate upstream dependencies."
    ),
)
RATE_LIMITED = Diagnosis(
    issue="Rate Limited (429)",
    severity=Severity.MEDIUM,
    recommendation="Implement exponential backoff and jitter. Request higher limits or add client-side batching.",
)
AUTH_ERROR = Diagnosis(
    issue="Auth/Permission Error",
    severity=Severity.HIGH,
    recommendation="Verify tokens/keys, scopes/roles, clock skew, and CORS rules. Rotate secrets if necessary.",
)
CLIENT_ERROR = Diagnosis(
    issue="Client Error (4xx)",
    severity=Severity.MEDIUM,
    recommendation="Validate request payloads against API schema; ensure correct headers and query parameters.",
)
UNKNOWN = Diagnosis(
    issue="Unknown",
    severity=Severity.MEDIUM,
    recommendation="Capture more telemetry (request/response bodies, headers) and re-run with higher verbosity.",
)

_ABORT_RE = re.compile(r"abort", re.IGNORECASE)
_DNS_RE = re.compile(
    r"ENOTFOUND|DNS|getaddrinfo|Name or service not known|nodename nor servname|"
    r"Temporary failure in name resolution|No address associated with hostname",
    re.IGNORECASE,
)
_CONNECTION_RE = re.compile(r"ECONNREFUSED|ECONNRESET|Connection refused|Connection reset", re.IGNORECASE)

_MESSAGE_RULES: tuple[tuple[re.Pattern[str], Diagnosis], ...] = (
    (_ABORT_RE, TIMEOUT),
    (_DNS_RE, DNS_FAILURE),
    (_CONNECTION_RE, CONNECTION_FAILURE),
)
_KIND_RULES: dict[ErrorKind, Diagnosis] = {
    ErrorKind.TIMEOUT: TIMEOUT,
    ErrorKind.DNS: DNS_FAILURE,
    ErrorKind.CONNECTION: CONNECTION_FAILURE,
}


def _classify_failure(failure: ProbeFailure) -> Diagnosis:
    message = failure.error_message or ""
    for pattern, diagnosis in _MESSAGE_RULES:
        if pattern.search(message):
            return diagnosis
    return _KIND_RULES.get(failure.error_kind, NETWORK_ERROR)


def _classify_response(success: ProbeSuccess) -> Diagnosis:
    status = success.status
    if 200 <= status < 300:
        if success.latency_ms > SLOW_RESPONSE_MS:
            return SLOW_RESPONSE
        return HEALTHY
    if status >= 500:
        return SERVER_ERROR
    if status == 429:
        return RATE_LIMITED
    if status in (401, 403):
        return AUTH_ERROR
    if status >= 400:
        # Medium even when the body reads like a payload validation complaint.
        return CLIENT_ERROR
    return UNKNOWN


def classify(outcome: ProbeOutcome | None) -> Diagnosis:
    """Return the diagnosis for an outcome; total over every input, including None."""
    if isinstance(outcome, ProbeFailure):
        return _classify_failure(outcome)
    if isinstance(outcome, ProbeSuccess):
        return _classify_response(outcome)
    return UNKNOWN


__all__ = ["SLOW_RESPONSE_MS", "classify"]
