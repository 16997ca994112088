# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run options consumed by the probe engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..config import DEFAULT_USER_AGENT, ProbeSettings


@dataclass(frozen=True)
class ProbeOptions:
    """Options for one run; ``retries`` counts attempts after the first."""

    concurrency: int = 5
    retries: int = 1
    timeout_ms: int = 8000
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def max_attempts(self) -> int:
        return max(0, self.retries) + 1

    def merged(self, **overrides: Any) -> ProbeOptions:
        """Layer overrides onto these options; None-valued overrides are ignored."""
        filtered = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **filtered) if filtered else self

    @classmethod
    def from_settings(cls, settings: ProbeSettings) -> ProbeOptions:
        """Build run options from the shared ProbeSettings."""
        return cls(
            concurrency=settings.concurrency,
            retries=max(0, settings.retries),
            timeout_ms=settings.timeout_ms,
            user_agent=settings.user_agent,
        )
