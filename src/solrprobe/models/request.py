# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe request model."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import DEFAULT_PORT


@dataclass(frozen=True)
class ProbeRequest:
    """
    Fully resolved probe target.

    `path` always starts with ``/``; an empty `username` means anonymous
    access and no credentials are sent.
    """

    check_status: bool
    check_latency: bool
    host: str
    port: str = DEFAULT_PORT
    path: str = "/solr"
    username: str = ""
    password: str = ""

    @property
    def auth(self) -> tuple[str, str] | None:
        if not self.username:
            return None
        return (self.username, self.password)

    @property
    def netloc_host(self) -> str:
        """Host as it appears in a URL; IPv6 literals are bracketed."""
        if ":" in self.host and not self.host.startswith("["):
            return f"[{self.host}]"
        return self.host

    def base_url(self, scheme: str = "http") -> str:
        return f"{scheme}://{self.netloc_host}:{self.port}{self.path.rstrip('/')}"
