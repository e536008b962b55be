# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Timed one-row query against a discovered core."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..config import HttpSettings, load_http_settings
from ..http.client import HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..models.request import ProbeRequest
from ..models.result import QueryResult, QueryStatus
from .endpoints import PROBE_QUERY_PARAMS, core_select_url

logger = logging.getLogger(__name__)


def _is_query_response(response: HttpResponse) -> bool:
    if not response.is_success:
        return False
    try:
        return isinstance(response.json(), dict)
    except ValueError:
        return False


class QueryProbeClient:
    """Issues ``q=*:*&rows=1`` against a core and measures the round trip."""

    def __init__(
        self,
        http_client: HttpClient,
        settings: HttpSettings | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.http_client = http_client
        self.settings = settings or load_http_settings()
        self._clock = clock

    def build_request(self, request: ProbeRequest, core: str) -> HttpRequest:
        return HttpRequest(
            url=core_select_url(request, core, self.settings.scheme),
            params=dict(PROBE_QUERY_PARAMS),
            auth=request.auth,
        )

    def probe(self, request: ProbeRequest, core: str) -> QueryResult:
        http_request = self.build_request(request, core)

        started = self._clock()
        response = self.http_client.request(http_request)
        elapsed_ms = max(0, int(round((self._clock() - started) * 1000)))

        if not response.ok:
            logger.warning("Query against core %r failed: %s", core, response.error_message)
            return QueryResult(status=QueryStatus.UNAVAILABLE, error_message=response.error_message)

        if not _is_query_response(response):
            # Reported upstream as no sample at all, not as unavailability.
            logger.info("Query against core %r returned an error response (%s)", core, response.status_code)
            return QueryResult(
                status=QueryStatus.QUERY_ERROR,
                error_message=f"Query error ({response.status_code}).",
            )

        logger.debug("Query against core %r answered in %d ms", core, elapsed_ms)
        return QueryResult(status=QueryStatus.AVAILABLE, elapsed_ms=elapsed_ms)
