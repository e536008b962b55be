# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SolrProbe CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ..config import HttpSettings, load_http_settings
from ..errors import ProbeError, ProbeFailure
from ..http import create_default_http_client
from ..inputs import resolve_request
from ..log import setup_logging
from ..models import MetricCatalog
from ..output import MetricEmitter
from ..runtime import SolrProbe

logger = logging.getLogger(__name__)

USAGE = "%(prog)s METRIC_STATE HOST PORT PATH USERNAME PASSWORD"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solr-probe",
        add_help=False,
        usage=USAGE,
        description="Check Solr availability and query response time.",
        epilog='Example: solr-probe "1,1" 10.10.2.5 8983 solr username password',
    )
    parser.add_argument("params", nargs="*", metavar="PARAM")
    return parser


def parse_params(parser: argparse.ArgumentParser, argv: Sequence[str]) -> list[str]:
    """Collect every token as a positional; the count is checked by resolve_request."""
    # Leading "--" keeps dash-prefixed values (passwords, stray flags) out of option parsing.
    return list(parser.parse_args(["--", *argv]).params)


def _report_failure(failure: ProbeFailure, message: str) -> int:
    if message:
        print(message)
    return failure.exit_code


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    params = parse_params(build_parser(), sys.argv[1:] if argv is None else argv)

    try:
        request = resolve_request(params)
    except ProbeError as exc:
        return _report_failure(exc.failure, exc.message)

    settings: HttpSettings = load_http_settings()
    http_client = create_default_http_client(settings)
    emitter = MetricEmitter()

    try:
        with SolrProbe(http_client=http_client, settings=settings, catalog=MetricCatalog()) as probe:
            outcome = probe.run(request)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Probe aborted")
        return _report_failure(ProbeFailure.GENERIC, str(exc))

    if outcome.failure is not None:
        return _report_failure(outcome.failure, outcome.message)

    emitter.emit(outcome.samples)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
