# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Failure taxonomy, exit codes and transport error categorisation."""

from __future__ import annotations

import socket
import ssl as ssl_module
from collections.abc import Iterator
from enum import Enum

import httpx


class ProbeFailure(str, Enum):
    """Closed set of terminal outcomes; each carries the process exit code."""

    USAGE = "USAGE"
    UNKNOWN_HOST = "UNKNOWN_HOST"
    AUTH = "AUTH"
    NOT_FOUND = "NOT_FOUND"
    HTTP = "HTTP"
    GENERIC = "GENERIC"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]

    @property
    def default_message(self) -> str:
        return _DEFAULT_MESSAGES[self]


_EXIT_CODES: dict[ProbeFailure, int] = {
    ProbeFailure.USAGE: 3,
    ProbeFailure.UNKNOWN_HOST: 28,
    ProbeFailure.AUTH: 1,
    ProbeFailure.NOT_FOUND: 8,
    ProbeFailure.HTTP: 1,
    ProbeFailure.GENERIC: 1,
}

_DEFAULT_MESSAGES: dict[ProbeFailure, str] = {
    ProbeFailure.USAGE: "Wrong number of parameters.",
    ProbeFailure.UNKNOWN_HOST: "Unknown host.",
    ProbeFailure.AUTH: "Invalid authentication.",
    ProbeFailure.NOT_FOUND: "",
    ProbeFailure.HTTP: "Response error.",
    ProbeFailure.GENERIC: "Unexpected error.",
}


class ProbeError(Exception):
    """Raised where a failure cannot be returned as a result (argument parsing)."""

    def __init__(self, failure: ProbeFailure, message: str | None = None):
        self.failure = failure
        self.message = failure.default_message if message is None else message
        super().__init__(self.message)

    @property
    def exit_code(self) -> int:
        return self.failure.exit_code


class UsageError(ProbeError):
    def __init__(self, message: str | None = None):
        super().__init__(ProbeFailure.USAGE, message)


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    DNS_ERROR = "DNS_ERROR"
    CONNECTION_REFUSED = "CONNECTION_REFUSED"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


# Fallback for transports that flatten the cause chain into the message.
_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "getaddrinfo failed",
    "no address associated with hostname",
)
_REFUSED_MARKERS = ("connection refused", "actively refused")


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    The whole cause chain is inspected because httpx wraps the socket-level
    error (``gaierror``, ``ConnectionRefusedError``) in its own types.
    """
    chain = list(_exception_chain(exc))

    for item in chain:
        if isinstance(item, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR
        if isinstance(item, ConnectionRefusedError):
            return ErrorCategory.CONNECTION_REFUSED

    for item in chain:
        if isinstance(item, (ssl_module.SSLError, ssl_module.CertificateError)):
            return ErrorCategory.SSL_ERROR
        if isinstance(item, (httpx.TimeoutException, TimeoutError, socket.timeout)):
            return ErrorCategory.TIMEOUT

    if isinstance(exc, httpx.ConnectError):
        text = str(exc).lower()
        if any(marker in text for marker in _DNS_MARKERS):
            return ErrorCategory.DNS_ERROR
        if any(marker in text for marker in _REFUSED_MARKERS):
            return ErrorCategory.CONNECTION_REFUSED

    if isinstance(exc, (httpx.TransportError, ConnectionError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def is_unknown_host(category: ErrorCategory | None) -> bool:
    """True when the host cannot be resolved or refuses the connection."""
    return category in (ErrorCategory.DNS_ERROR, ErrorCategory.CONNECTION_REFUSED)


__all__ = [
    "ErrorCategory",
    "ProbeError",
    "ProbeFailure",
    "UsageError",
    "categorize_exception",
    "is_unknown_host",
]
