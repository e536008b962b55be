# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level SolrProbe facade: discovery followed by the timed query."""

from __future__ import annotations

from contextlib import suppress

from .config import HttpSettings, load_http_settings
from .http.client import HttpClient, create_default_http_client
from .models import MetricCatalog, MetricKey, MetricSample, ProbeOutcome, ProbeRequest, QueryResult, QueryStatus
from .solr import CoreDiscoveryClient, QueryProbeClient


def samples_for(request: ProbeRequest, result: QueryResult, catalog: MetricCatalog) -> list[MetricSample]:
    """Translate a query result into the samples the request asked for."""
    samples: list[MetricSample] = []
    if result.status is QueryStatus.UNAVAILABLE:
        if request.check_status:
            samples.append(catalog.sample(MetricKey.STATUS, 0))
    elif result.status is QueryStatus.AVAILABLE:
        if request.check_status:
            samples.append(catalog.sample(MetricKey.STATUS, 1))
        if request.check_latency:
            samples.append(catalog.sample(MetricKey.RESPONSE_TIME, result.elapsed_ms or 0))
    return samples


class SolrProbe:
    """
    Wires one HTTP client through core discovery and the query probe.

    The query is only issued once discovery has produced a core name; a
    discovery failure ends the run with no samples.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        settings: HttpSettings | None = None,
        catalog: MetricCatalog | None = None,
    ):
        self.settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.settings)
        self.catalog = catalog or MetricCatalog()
        self.discovery = CoreDiscoveryClient(self.http_client, self.settings)
        self.query_probe = QueryProbeClient(self.http_client, self.settings)

    def run(self, request: ProbeRequest) -> ProbeOutcome:
        discovered = self.discovery.discover(request)
        if not discovered.ok:
            return ProbeOutcome(failure=discovered.failure, message=discovered.message)

        core = discovered.core or ""
        result = self.query_probe.probe(request, core)
        return ProbeOutcome(
            samples=samples_for(request, result, self.catalog),
            core=core,
        )

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> "SolrProbe":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
