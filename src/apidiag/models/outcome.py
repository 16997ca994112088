# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-attempt probe outcomes."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ErrorKind


@dataclass(frozen=True)
class ProbeSuccess:
    """A response was received; says nothing about whether the status is acceptable."""

    status: int
    latency_ms: int
    body_snippet: str = ""


@dataclass(frozen=True)
class ProbeFailure:
    """No response was obtained."""

    error_kind: ErrorKind
    error_message: str
    error_type: str | None = None


ProbeOutcome = ProbeSuccess | ProbeFailure
