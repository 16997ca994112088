# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from apidiag.diagnosis import classify
from apidiag.errors import ErrorKind
from apidiag.models import ProbeFailure, ProbeSuccess, Severity


def _failure(message, kind=ErrorKind.NETWORK):
    return ProbeFailure(error_kind=kind, error_message=message)


def test_ok_fast_response():
    d = classify(ProbeSuccess(status=200, latency_ms=120, body_snippet="{}"))
    assert d.issue == "OK"
    assert d.severity == Severity.LOW
    assert d.recommendation == "No action required."


def test_slow_success():
    d = classify(ProbeSuccess(status=200, latency_ms=3000, body_snippet="ok"))
    assert d.issue == "Slow Response"
    assert d.severity == Severity.MEDIUM


def test_slow_threshold_is_exclusive():
    assert classify(ProbeSuccess(status=204, latency_ms=1500)).issue == "OK"
    assert classify(ProbeSuccess(status=204, latency_ms=1501)).issue == "Slow Response"


def test_server_error():
    d = classify(ProbeSuccess(status=500, latency_ms=50, body_snippet="boom"))
    assert d.issue == "Server Error (5xx)"
    assert d.severity == Severity.HIGH


@pytest.mark.parametrize(
    ("status", "issue", "severity"),
    [
        (429, "Rate Limited (429)", Severity.MEDIUM),
        (401, "Auth/Permission Error", Severity.HIGH),
        (403, "Auth/Permission Error", Severity.HIGH),
        (404, "Client Error (4xx)", Severity.MEDIUM),
        (503, "Server Error (5xx)", Severity.HIGH),
        (302, "Unknown", Severity.MEDIUM),
    ],
)
def test_status_branches(status, issue, severity):
    d = classify(ProbeSuccess(status=status, latency_ms=10))
    assert d.issue == issue
    assert d.severity == severity


def test_client_error_severity_ignores_validation_hint():
    hinted = classify(ProbeSuccess(status=400, latency_ms=50, body_snippet="missing required field"))
    plain = classify(ProbeSuccess(status=400, latency_ms=50, body_snippet="nope"))
    assert hinted.issue == "Client Error (4xx)"
    assert hinted.severity == Severity.MEDIUM
    assert plain == hinted


def test_timeout_message():
    d = classify(_failure("The operation was aborted"))
    assert d.issue == "Timeout"
    assert d.severity == Severity.HIGH


def test_dns_message():
    d = classify(_failure("ENOTFOUND api.service.local"))
    assert d.issue == "DNS/Host Resolution Failure"
    assert d.severity == Severity.HIGH


def test_python_resolver_message_is_dns():
    d = classify(_failure("[Errno -2] Name or service not known", kind=ErrorKind.CONNECTION))
    assert d.issue == "DNS/Host Resolution Failure"


def test_connection_refused_message():
    assert classify(_failure("connect ECONNREFUSED 127.0.0.1:80")).issue == "Connection Refused/Reset"
    assert classify(_failure("[Errno 111] Connection refused")).issue == "Connection Refused/Reset"


def test_message_takes_precedence_over_kind():
    d = classify(_failure("request aborted by peer", kind=ErrorKind.DNS))
    assert d.issue == "Timeout"


def test_kind_used_when_message_is_opaque():
    assert classify(_failure("timed out", kind=ErrorKind.TIMEOUT)).issue == "Timeout"
    assert classify(_failure("boom", kind=ErrorKind.DNS)).issue == "DNS/Host Resolution Failure"
    assert classify(_failure("boom", kind=ErrorKind.CONNECTION)).issue == "Connection Refused/Reset"


def test_other_failures_are_network_errors():
    d = classify(_failure("SSL: CERTIFICATE_VERIFY_FAILED"))
    assert d.issue == "Network/Client Error"
    assert d.severity == Severity.HIGH
    assert classify(_failure("Missing URL", kind=ErrorKind.CONFIGURATION)).issue == "Network/Client Error"


def test_unknown_without_outcome():
    d = classify(None)
    assert d.issue == "Unknown"
    assert d.severity == Severity.MEDIUM


def test_classify_is_idempotent():
    outcome = ProbeSuccess(status=200, latency_ms=3000, body_snippet="x")
    assert classify(outcome) == classify(outcome)
    failure = _failure("ENOTFOUND x")
    assert classify(failure) == classify(failure)
