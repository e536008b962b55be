# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL and parameter builders for the Solr endpoints the probe touches."""

from __future__ import annotations

from urllib.parse import quote

from ..models.request import ProbeRequest

CORE_STATUS_PARAMS: dict[str, str] = {"action": "STATUS", "wt": "json"}
PROBE_QUERY_PARAMS: dict[str, str] = {"q": "*:*", "start": "0", "rows": "1", "wt": "json"}


def core_admin_url(request: ProbeRequest, scheme: str = "http") -> str:
    return f"{request.base_url(scheme)}/admin/cores"


def core_select_url(request: ProbeRequest, core: str, scheme: str = "http") -> str:
    return f"{request.base_url(scheme)}/{quote(core, safe='')}/select"
