# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Standalone HTML rendering of probe results."""

from __future__ import annotations

from collections.abc import Sequence
from html import escape
from typing import Any

from ..models.diagnosis import Severity
from ..models.result import ProbeResult

DEFAULT_TITLE = "API Diagnosis Report"

_STYLE = """\
  :root {
    --bg: #0b1020;
    --card: #121a2e;
    --text: #e8eefc;
    --muted: #aab7d4;
    --ok: #153a2a;
    --med: #3b2a10;
    --high: #3a1216;
    --border: #2a3556;
    --accent: #6aa6ff;
  }
  body {
    margin: 0; padding: 24px; font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif;
    background: var(--bg); color: var(--text);
  }
  h1 { margin: 0 0 6px 0; font-weight: 700; }
  .meta { color: var(--muted); margin-bottom: 16px; }
  table { width: 100%; border-collapse: collapse; background: var(--card); border-radius: 12px; overflow: hidden; }
  th, td { padding: 10px 12px; border-bottom: 1px solid var(--border); vertical-align: top; font-size: 14px; }
  th { text-align: left; color: var(--accent); background: #0d152a; position: sticky; top: 0; z-index: 1; }
  tr.ok { background: rgba(21, 58, 42, 0.35); }
  tr.sev-med { background: rgba(59, 42, 16, 0.35); }
  tr.sev-high { background: rgba(58, 18, 22, 0.45); }
  .url a { color: #cfe1ff; text-decoration: none; }
  .url a:hover { text-decoration: underline; }
  pre { margin: 0; max-height: 120px; overflow: auto; white-space: pre-wrap; }
  .legend { margin: 12px 0 18px; font-size: 13px; color: var(--muted); }
  .legend span { padding: 4px 8px; border-radius: 8px; margin-right: 8px; }
  .tag-ok { background: var(--ok); color: #cfeee0; }
  .tag-med { background: var(--med); color: #f6e6c9; }
  .tag-high { background: var(--high); color: #ffd6dc; }
"""

_HEADINGS = (
    "Timestamp",
    "Name",
    "Method",
    "URL",
    "Status",
    "OK",
    "Latency (ms)",
    "Issue",
    "Severity",
    "Expected",
    "Attempts",
    "Error",
    "Response Snippet",
)


def _esc(value: Any) -> str:
    return escape("" if value is None else str(value))


def row_class(result: ProbeResult) -> str:
    if result.ok:
        return "ok"
    if result.diagnosis.severity == Severity.HIGH:
        return "sev-high"
    return "sev-med"


def _row(result: ProbeResult) -> str:
    url = _esc(result.url)
    cells = [
        f"<td>{_esc(result.timestamp)}</td>",
        f"<td>{_esc(result.name)}</td>",
        f"<td>{_esc(result.method)}</td>",
        f'<td class="url"><a href="{url}" target="_blank" rel="noreferrer">{url}</a></td>',
        f"<td>{_esc(result.status)}</td>",
        f"<td>{'✅' if result.ok else '❌'}</td>",
        f"<td>{_esc(result.latency_ms)}</td>",
        f"<td>{_esc(result.diagnosis.issue)}</td>",
        f"<td>{_esc(result.diagnosis.severity.value)}</td>",
        f"<td>{_esc(result.expected_status)}</td>",
        f"<td>{_esc(result.attempt_count)}</td>",
        f"<td>{_esc(result.error)}</td>",
        f"<td><pre>{_esc(result.text_snippet)}</pre></td>",
    ]
    return f'<tr class="{row_class(result)}">' + "".join(cells) + "</tr>"


def to_html(results: Sequence[ProbeResult], *, generated_at: str = "", title: str = DEFAULT_TITLE) -> str:
    headings = "\n".join(f"        <th>{heading}</th>" for heading in _HEADINGS)
    rows = "\n".join(_row(result) for result in results)
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8"/>\n'
        f"<title>{_esc(title)}</title>\n"
        '<meta name="viewport" content="width=device-width, initial-scale=1"/>\n'
        f"<style>\n{_STYLE}</style>\n"
        "</head>\n"
        "<body>\n"
        f"  <h1>{_esc(title)}</h1>\n"
        f'  <div class="meta">Generated at {_esc(generated_at)}</div>\n'
        '  <div class="legend">\n'
        '    <span class="tag-ok">OK</span>\n'
        '    <span class="tag-med">Medium Severity</span>\n'
        '    <span class="tag-high">High Severity</span>\n'
        "  </div>\n"
        "  <table>\n"
        "    <thead>\n"
        "      <tr>\n"
        f"{headings}\n"
        "      </tr>\n"
        "    </thead>\n"
        "    <tbody>\n"
        f"{rows}\n"
        "    </tbody>\n"
        "  </table>\n"
        "</body>\n"
        "</html>"
    )
