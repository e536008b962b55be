# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Metric identifiers and samples."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class MetricKey(str, Enum):
    STATUS = "Status"
    RESPONSE_TIME = "ResponseTime"


DEFAULT_METRIC_IDS: Mapping[MetricKey, str] = MappingProxyType(
    {
        MetricKey.STATUS: "1709:Status:9",
        MetricKey.RESPONSE_TIME: "1710:Response Time:4",
    }
)


@dataclass(frozen=True)
class MetricSample:
    metric_id: str
    value: str


@dataclass(frozen=True)
class MetricCatalog:
    """Read-only table of platform-assigned metric identifiers."""

    ids: Mapping[MetricKey, str] = field(default_factory=lambda: DEFAULT_METRIC_IDS)

    def __post_init__(self) -> None:
        missing = [key.value for key in MetricKey if key not in self.ids]
        if missing:
            raise ValueError(f"Metric catalog is missing identifiers for: {', '.join(missing)}")
        object.__setattr__(self, "ids", MappingProxyType(dict(self.ids)))

    def __getitem__(self, key: MetricKey) -> str:
        return self.ids[key]

    def sample(self, key: MetricKey, value: object) -> MetricSample:
        return MetricSample(metric_id=self.ids[key], value=str(value))
