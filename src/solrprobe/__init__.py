# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SolrProbe package entrypoint.

A single-shot availability probe for Solr: it lists the instance's cores,
runs a one-row query against the first one and reports Status and Response
Time in the line format read by the monitoring agent. HTTP behavior is
abstracted behind an injectable client interface, and domain objects are
modeled with typed dataclasses.
"""

from .config import HttpSettings, load_http_settings
from .errors import ErrorCategory, ProbeError, ProbeFailure, UsageError
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, StubHttpClient, create_default_http_client
from .inputs import resolve_request
from .log import setup_logging
from .models import MetricCatalog, MetricKey, MetricSample, ProbeOutcome, ProbeRequest
from .output import MetricEmitter
from .runtime import SolrProbe
from .version import __version__

__all__ = [
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "MetricCatalog",
    "MetricEmitter",
    "MetricKey",
    "MetricSample",
    "ProbeError",
    "ProbeFailure",
    "ProbeOutcome",
    "ProbeRequest",
    "SolrProbe",
    "StubHttpClient",
    "UsageError",
    "create_default_http_client",
    "load_http_settings",
    "resolve_request",
    "setup_logging",
    "__version__",
]
