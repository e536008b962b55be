# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Solr discovery and query probes."""

from .cores import CoreDiscoveryClient, first_core_name
from .query import QueryProbeClient

__all__ = ["CoreDiscoveryClient", "QueryProbeClient", "first_core_name"]
