# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for apidiag."""

from .diagnosis import Diagnosis, Severity
from .endpoint import EndpointSpec, load_endpoints
from .options import ProbeOptions
from .outcome import ProbeFailure, ProbeOutcome, ProbeSuccess
from .result import ProbeResult, RunSummary, now_iso

__all__ = [
    "Diagnosis",
    "EndpointSpec",
    "ProbeFailure",
    "ProbeOptions",
    "ProbeOutcome",
    "ProbeResult",
    "ProbeSuccess",
    "RunSummary",
    "Severity",
    "load_endpoints",
    "now_iso",
]
