# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint descriptors and the JSON endpoint config loader."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..errors import ConfigError

MISSING_NAME = "(missing name)"


@dataclass(frozen=True)
class EndpointSpec:
    """
    A configured target to probe.

    Only ``url`` is required for probing; an endpoint without one is still accepted
    here and reported as a configuration failure by the retry controller.
    """

    url: str | None = None
    name: str | None = None
    method: str = "GET"
    headers: Mapping[str, str] | None = None
    body: Any = None
    expected_status: int | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.url or MISSING_NAME

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EndpointSpec:
        """Build an endpoint from a config entry (camelCase ``expectedStatus`` or snake_case)."""
        if not isinstance(data, Mapping):
            raise ConfigError(f"Endpoint entry must be an object, got {type(data).__name__}")

        expected = data.get("expectedStatus", data.get("expected_status"))
        if expected is not None:
            try:
                expected = int(expected)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid expectedStatus {expected!r}") from exc

        headers = data.get("headers")
        if headers is not None and not isinstance(headers, Mapping):
            raise ConfigError(f"Endpoint headers must be an object, got {type(headers).__name__}")

        return cls(
            url=data.get("url") or None,
            name=data.get("name") or None,
            method=str(data.get("method") or "GET").upper(),
            headers={str(k): str(v) for k, v in headers.items()} if headers else None,
            body=data.get("body"),
            expected_status=expected,
        )


def load_endpoints(path: str | Path) -> list[EndpointSpec]:
    """Read a JSON array of endpoint entries; any unreadable or malformed file raises ConfigError."""
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config not found at {config_path.resolve()}")
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not read config {config_path}: {exc}") from exc
    if not isinstance(raw, list):
        raise ConfigError(f"Config {config_path} must contain a JSON array of endpoints")
    return [EndpointSpec.from_mapping(entry) for entry in raw]
