# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for SolrProbe."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"SolrProbe/{__version__} (Solr availability monitor)"
DEFAULT_PORT = "8983"


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None or not value.strip():
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


@dataclass
class HttpSettings:
    """HTTP client defaults.

    ``timeout`` is ``None`` unless configured: the probe waits on the
    transport's own behaviour, matching how the monitor has always run.
    """

    timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT
    scheme: str = "http"
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("SOLRPROBE_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        scheme = os.getenv("SOLRPROBE_HTTP_SCHEME", cls.scheme).strip().lower()
        if scheme not in {"http", "https"}:
            scheme = cls.scheme
        return cls(
            timeout=_optional_float_env("SOLRPROBE_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("SOLRPROBE_USER_AGENT", cls.user_agent),
            scheme=scheme,
            verify_ssl=_bool_env("SOLRPROBE_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
