# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Result objects returned by the discovery and query steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..errors import ProbeFailure
from .metric import MetricSample


@dataclass(frozen=True)
class DiscoveryResult:
    """Either a core name or the failure that ends the run."""

    core: str | None = None
    failure: ProbeFailure | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None and self.core is not None

    @classmethod
    def found(cls, core: str) -> DiscoveryResult:
        return cls(core=core)

    @classmethod
    def failed(cls, failure: ProbeFailure, message: str | None = None) -> DiscoveryResult:
        return cls(failure=failure, message=failure.default_message if message is None else message)


class QueryStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"
    QUERY_ERROR = "QUERY_ERROR"


@dataclass(frozen=True)
class QueryResult:
    status: QueryStatus
    elapsed_ms: int | None = None
    error_message: str | None = None


@dataclass
class ProbeOutcome:
    """Everything a single run produced: samples to print or a terminal failure."""

    samples: list[MetricSample] = field(default_factory=list)
    core: str | None = None
    failure: ProbeFailure | None = None
    message: str = ""

    @property
    def exit_code(self) -> int:
        return self.failure.exit_code if self.failure is not None else 0
