# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Resolve the positional command-line arguments into a ProbeRequest."""

from __future__ import annotations

from collections.abc import Sequence

from .config import DEFAULT_PORT
from .errors import UsageError
from .models.request import ProbeRequest

EXPECTED_ARGUMENTS = 6
# The scheduler passes this marker when no credential was configured.
EMPTY_CREDENTIAL_SENTINEL = "{0}"
_EMPTY_MARKERS = frozenset({"", '""', '"'})


def parse_metric_state(raw: str) -> tuple[bool, bool]:
    """Return the (Status, ResponseTime) toggles encoded as ``"1,0"`` style flags."""
    # Quotes anywhere and padding around tokens are tolerated; only an exact "1" enables a flag.
    tokens = raw.replace('"', "").split(",")
    flags = [token.strip() == "1" for token in tokens[:2]]
    flags += [False] * (2 - len(flags))
    return flags[0], flags[1]


def normalize_credential(value: str) -> str:
    return "" if value in _EMPTY_MARKERS else value


def normalize_port(port: str) -> str:
    return port if port else DEFAULT_PORT


def normalize_path(path: str) -> str:
    return path if path.startswith("/") else "/" + path


def resolve_request(args: Sequence[str]) -> ProbeRequest:
    """
    Build a ProbeRequest from ``METRIC_STATE HOST PORT PATH USERNAME PASSWORD``.

    Raises UsageError when the argument count is not exactly six.
    """
    if len(args) != EXPECTED_ARGUMENTS:
        raise UsageError()

    metric_state, host, port, path, username, password = args
    check_status, check_latency = parse_metric_state(metric_state)

    username = normalize_credential(username)
    password = normalize_credential(password)
    if username == EMPTY_CREDENTIAL_SENTINEL:
        username = password = ""

    return ProbeRequest(
        check_status=check_status,
        check_latency=check_latency,
        host=host,
        port=normalize_port(port),
        path=normalize_path(path),
        username=username,
        password=password,
    )


__all__ = [
    "EMPTY_CREDENTIAL_SENTINEL",
    "EXPECTED_ARGUMENTS",
    "normalize_credential",
    "normalize_path",
    "normalize_port",
    "parse_metric_state",
    "resolve_request",
]
