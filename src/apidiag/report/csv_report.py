# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CSV rendering of probe results."""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from typing import Any

from ..models.result import ProbeResult

CSV_COLUMNS = (
    "timestamp",
    "name",
    "method",
    "url",
    "status",
    "ok",
    "latency_ms",
    "issue",
    "severity",
    "expected_status",
    "attempts",
    "error_message",
    "response_snippet",
)
CSV_SNIPPET_MAX_CHARS = 200


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).replace("\r\n", " ").replace("\n", " ")


def _row(result: ProbeResult) -> list[str]:
    snippet = (result.text_snippet or "")[:CSV_SNIPPET_MAX_CHARS]
    values = (
        result.timestamp,
        result.name,
        result.method,
        result.url,
        result.status,
        result.ok,
        result.latency_ms,
        result.diagnosis.issue,
        result.diagnosis.severity.value,
        result.expected_status,
        result.attempt_count,
        result.error,
        snippet,
    )
    return [_cell(value) for value in values]


def to_csv(results: Sequence[ProbeResult]) -> str:
    """Unquoted header line, then one fully quoted row per result (quotes doubled)."""
    buffer = io.StringIO()
    buffer.write(",".join(CSV_COLUMNS) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(_row(result) for result in results)
    return buffer.getvalue().rstrip("\n")
