# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for apidiag."""

import os
from dataclasses import dataclass

DEFAULT_USER_AGENT = "api-diagnosis-tool/1.0"


def _positive_int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        parsed = int(value) if value is not None else default
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _non_negative_int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        parsed = int(value) if value is not None else default
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ProbeSettings:
    """Probe run defaults."""

    concurrency: int = 5
    retries: int = 1
    timeout_ms: int = 8000
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    follow_redirects: bool = True

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            concurrency=_positive_int_env("APIDIAG_CONCURRENCY", cls.concurrency),
            retries=_non_negative_int_env("APIDIAG_RETRIES", cls.retries),
            timeout_ms=_positive_int_env("APIDIAG_TIMEOUT_MS", cls.timeout_ms),
            user_agent=os.getenv("APIDIAG_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("APIDIAG_VERIFY_SSL", cls.verify_ssl),
            follow_redirects=_bool_env("APIDIAG_FOLLOW_REDIRECTS", cls.follow_redirects),
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
