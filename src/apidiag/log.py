# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for apidiag."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name (argument, then APIDIAG_LOG_LEVEL, then INFO) to a logging constant."""
    name = (level or os.getenv("APIDIAG_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI use; progress lines are emitted at INFO."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)


__all__ = ["resolve_log_level", "setup_logging"]
