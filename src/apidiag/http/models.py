# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models exchanged with Transport implementations."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

Headers = dict[str, str]
BodyReader = Callable[[], Awaitable[str]]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by Transport implementations."""

    url: str
    method: str = "GET"
    headers: Headers = field(default_factory=dict)
    body: str | None = None
    timeout: float | None = None


@dataclass
class HttpResponse:
    """
    Response whose status is known before its body has been read.

    Transports that already hold the full body pass ``text``; streaming transports
    pass a ``reader`` coroutine function that is awaited at most once.
    """

    status_code: int
    headers: Headers = field(default_factory=dict)
    text: str | None = None
    url: str | None = None
    reader: BodyReader | None = field(default=None, repr=False, compare=False)

    async def read_text(self) -> str:
        if self.text is None:
            self.text = await self.reader() if self.reader is not None else ""
        return self.text
