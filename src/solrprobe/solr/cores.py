# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Discover a core to probe through the CoreAdmin STATUS action."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..errors import ProbeFailure, is_unknown_host
from ..http.client import HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..models.request import ProbeRequest
from ..models.result import DiscoveryResult
from .endpoints import CORE_STATUS_PARAMS, core_admin_url

logger = logging.getLogger(__name__)


def first_core_name(payload: Any) -> str | None:
    """
    Return the first key of ``payload["status"]`` in document order.

    Raises ValueError when the payload does not carry a ``status`` object.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("Core status response is not a JSON object.")
    status = payload.get("status")
    if not isinstance(status, Mapping):
        raise ValueError("Core status response has no 'status' object.")
    for name in status:
        return str(name)
    return None


class CoreDiscoveryClient:
    """Resolves the name of the first core reported by the Solr instance."""

    def __init__(self, http_client: HttpClient, settings: HttpSettings | None = None):
        self.http_client = http_client
        self.settings = settings or load_http_settings()

    def build_request(self, request: ProbeRequest) -> HttpRequest:
        return HttpRequest(
            url=core_admin_url(request, self.settings.scheme),
            params=dict(CORE_STATUS_PARAMS),
            auth=request.auth,
        )

    def discover(self, request: ProbeRequest) -> DiscoveryResult:
        http_request = self.build_request(request)
        logger.debug("Listing cores via %s", http_request.url)
        response = self.http_client.request(http_request)
        result = self._interpret(response)
        if result.ok:
            logger.info("Selected core %r", result.core)
        else:
            logger.warning("Core discovery failed (%s): %s", result.failure.value, result.message or "no cores")
        return result

    def _interpret(self, response: HttpResponse) -> DiscoveryResult:
        if not response.ok:
            if is_unknown_host(response.error_category):
                return DiscoveryResult.failed(ProbeFailure.UNKNOWN_HOST)
            return DiscoveryResult.failed(
                ProbeFailure.GENERIC,
                response.error_message or ProbeFailure.GENERIC.default_message,
            )

        if response.status_code == 401:
            return DiscoveryResult.failed(ProbeFailure.AUTH)
        if response.status_code != 200:
            return DiscoveryResult.failed(ProbeFailure.HTTP, f"Response error ({response.status_code}).")

        try:
            core = first_core_name(response.json())
        except ValueError as exc:
            return DiscoveryResult.failed(ProbeFailure.GENERIC, str(exc))

        if core is None:
            return DiscoveryResult.failed(ProbeFailure.NOT_FOUND)
        return DiscoveryResult.found(core)
