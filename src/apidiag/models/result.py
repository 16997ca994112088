# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Final per-endpoint results and run summary."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .diagnosis import Diagnosis


def now_iso() -> str:
    """UTC timestamp in the ``2025-01-01T00:00:00.000Z`` form used by reports."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ProbeResult:
    """Terminal result for one endpoint, built once by the retry controller."""

    name: str
    method: str
    url: str | None
    ok: bool
    diagnosis: Diagnosis
    attempt_count: int
    status: int | None = None
    latency_ms: int | None = None
    error: str | None = None
    error_type: str | None = None
    text_snippet: str | None = None
    expected_status: int | None = None
    timestamp: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "method": self.method,
            "url": self.url,
            "ok": self.ok,
            "status": self.status,
            "latencyMs": self.latency_ms,
            "error": self.error,
            "errorType": self.error_type,
            "diagnosis": self.diagnosis.to_dict(),
            "textSnippet": self.text_snippet,
            "expectedStatus": self.expected_status,
            "attemptCount": self.attempt_count,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class RunSummary:
    total: int
    ok_count: int

    @property
    def issue_count(self) -> int:
        return self.total - self.ok_count

    def line(self) -> str:
        return f"Completed: {self.ok_count}/{self.total} OK ({self.issue_count} with issues)"

    @classmethod
    def from_results(cls, results: Sequence[ProbeResult]) -> RunSummary:
        return cls(total=len(results), ok_count=sum(1 for r in results if r.ok))
