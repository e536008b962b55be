# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from solrprobe.config import HttpSettings
from solrprobe.errors import ErrorCategory
from solrprobe.http import HttpResponse, StubHttpClient
from solrprobe.models import ProbeRequest, QueryStatus
from solrprobe.solr import QueryProbeClient

SELECT_URL = "http://solr.local:8983/solr/core1/select"


class FakeClock:
    def __init__(self, *ticks):
        self._ticks = list(ticks)

    def __call__(self):
        return self._ticks.pop(0)


def _request(**kwargs):
    values = {"check_status": True, "check_latency": True, "host": "solr.local", "port": "8983", "path": "/solr"}
    values.update(kwargs)
    return ProbeRequest(**values)


def _probe(response, clock=None, request=None, core="core1"):
    stub = StubHttpClient({SELECT_URL: response})
    client = QueryProbeClient(stub, HttpSettings(), clock=clock or FakeClock(10.0, 10.25))
    return client.probe(request or _request(), core), stub


def test_successful_query_measures_latency():
    body = '{"responseHeader": {"status": 0, "QTime": 1}, "response": {"numFound": 0, "docs": []}}'
    result, stub = _probe(HttpResponse(ok=True, status_code=200, text=body))
    assert result.status is QueryStatus.AVAILABLE
    assert result.elapsed_ms == 250
    sent = stub.requests[0]
    assert sent.url == SELECT_URL
    assert sent.params["q"] == "*:*"
    assert sent.params["rows"] == "1"
    assert sent.params["wt"] == "json"


def test_query_passes_credentials():
    body = '{"response": {"docs": []}}'
    _, stub = _probe(
        HttpResponse(ok=True, status_code=200, text=body),
        request=_request(username="admin", password="pw"),
    )
    assert stub.requests[0].auth == ("admin", "pw")


def test_transport_failure_is_unavailable_without_latency():
    result, _ = _probe(HttpResponse(ok=False, error_message="refused", error_category=ErrorCategory.CONNECTION_REFUSED))
    assert result.status is QueryStatus.UNAVAILABLE
    assert result.elapsed_ms is None


def test_error_status_is_query_error():
    result, _ = _probe(HttpResponse(ok=True, status_code=500, text='{"error": {"msg": "boom"}}'))
    assert result.status is QueryStatus.QUERY_ERROR
    assert result.elapsed_ms is None


def test_non_json_body_is_query_error():
    result, _ = _probe(HttpResponse(ok=True, status_code=200, text="<html></html>"))
    assert result.status is QueryStatus.QUERY_ERROR


def test_core_names_are_quoted():
    client = QueryProbeClient(StubHttpClient(), HttpSettings())
    http_request = client.build_request(_request(), "my core/1")
    assert http_request.url == "http://solr.local:8983/solr/my%20core%2F1/select"


def test_elapsed_never_negative():
    body = "{}"
    result, _ = _probe(HttpResponse(ok=True, status_code=200, text=body), clock=FakeClock(5.0, 4.0))
    assert result.elapsed_ms == 0
