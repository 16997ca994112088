# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probing engine: attempt executor, retry controller, scheduler and aggregation."""

from .engine import ProbeEngine, run_diagnostics, summarize
from .executor import attempt
from .retry import run_endpoint
from .scheduler import run_with_concurrency

__all__ = [
    "ProbeEngine",
    "attempt",
    "run_diagnostics",
    "run_endpoint",
    "run_with_concurrency",
    "summarize",
]
