# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header merging utilities.

HTTP header field names are case-insensitive (RFC 9110), so an endpoint that sets
``user-agent`` must replace the default ``User-Agent`` rather than send both.
"""

from __future__ import annotations

from collections.abc import Mapping


def merge_headers(base: Mapping[str, str], overrides: Mapping[str, object] | None) -> dict[str, str]:
    """Return ``base`` updated with ``overrides``; override keys win regardless of casing."""
    merged: dict[str, str] = dict(base)
    if not overrides:
        return merged
    for key, value in overrides.items():
        if key is None:
            continue
        name = str(key)
        for existing in [k for k in merged if k.lower() == name.lower()]:
            del merged[existing]
        merged[name] = "" if value is None else str(value)
    return merged


__all__ = ["merge_headers"]
