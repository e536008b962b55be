# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Line-oriented metric output consumed by the monitoring agent."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .models.metric import MetricSample


def format_sample(sample: MetricSample) -> str:
    return f"{sample.metric_id}|{sample.value}|"


class MetricEmitter:
    """Writes one ``<id>|<value>|`` line per sample, in the order given."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the writes.
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, samples: Iterable[MetricSample]) -> int:
        count = 0
        for sample in samples:
            self.stream.write(format_sample(sample) + "\n")
            self.stream.flush()
            count += 1
        return count
