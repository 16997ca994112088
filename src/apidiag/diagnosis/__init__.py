# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Outcome-to-diagnosis classification."""

from .classifier import SLOW_RESPONSE_MS, classify

__all__ = ["SLOW_RESPONSE_MS", "classify"]
