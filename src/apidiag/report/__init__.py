# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Report rendering for probe results."""

from pathlib import Path

from .csv_report import CSV_COLUMNS, to_csv
from .html_report import to_html


def write_file_safe(target: str | Path, content: str) -> Path:
    """Write ``content`` as UTF-8, creating parent directories as needed."""
    path = Path(target)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


__all__ = ["CSV_COLUMNS", "to_csv", "to_html", "write_file_safe"]
