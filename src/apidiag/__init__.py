# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
apidiag package entrypoint.

This package probes configured API endpoints with bounded concurrency, per-attempt
timeouts and fixed-backoff retries, and classifies every terminal outcome into a
diagnosis (issue, severity, recommendation) for CSV/HTML reporting. Network I/O is
abstracted behind an injectable transport interface, and domain objects are modeled
with typed dataclasses.
"""

from .config import ProbeSettings, load_probe_settings
from .diagnosis import classify
from .http import (
    CallableTransport,
    HttpRequest,
    HttpResponse,
    HttpxTransport,
    StubTransport,
    Transport,
    create_default_transport,
)
from .log import setup_logging
from .models import (
    Diagnosis,
    EndpointSpec,
    ProbeFailure,
    ProbeOptions,
    ProbeResult,
    ProbeSuccess,
    RunSummary,
    Severity,
    load_endpoints,
)
from .probe import ProbeEngine, run_diagnostics, summarize
from .runtime import ApiDiagnosis
from .version import __version__

__all__ = [
    "ApiDiagnosis",
    "CallableTransport",
    "Diagnosis",
    "EndpointSpec",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "ProbeEngine",
    "ProbeFailure",
    "ProbeOptions",
    "ProbeResult",
    "ProbeSettings",
    "ProbeSuccess",
    "RunSummary",
    "Severity",
    "StubTransport",
    "Transport",
    "classify",
    "create_default_transport",
    "load_endpoints",
    "load_probe_settings",
    "run_diagnostics",
    "setup_logging",
    "summarize",
    "__version__",
]
