# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for SolrProbe."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .metric import DEFAULT_METRIC_IDS, MetricCatalog, MetricKey, MetricSample
from .request import ProbeRequest
from .result import DiscoveryResult, ProbeOutcome, QueryResult, QueryStatus

__all__ = [
    "DEFAULT_METRIC_IDS",
    "DiscoveryResult",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "MetricCatalog",
    "MetricKey",
    "MetricSample",
    "ProbeOutcome",
    "ProbeRequest",
    "QueryResult",
    "QueryStatus",
]
