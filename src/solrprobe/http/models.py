# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across SolrProbe."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory

Headers = dict[str, str]
BasicAuth = tuple[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    params: dict[str, str] | None = None
    auth: BasicAuth | None = None
    # Solr redirects are reported as plain non-200 responses.
    allow_redirects: bool = False


@dataclass
class HttpResponse:
    """Normalized HTTP response; ``ok`` is False only for transport failures."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.ok and self.status_code is not None and 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON; raises ValueError on malformed payloads."""
        return json.loads(self.text)
