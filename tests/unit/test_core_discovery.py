# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from solrprobe.config import HttpSettings
from solrprobe.errors import ErrorCategory, ProbeFailure
from solrprobe.http import HttpResponse, StubHttpClient
from solrprobe.models import ProbeRequest
from solrprobe.solr import CoreDiscoveryClient, first_core_name

ADMIN_URL = "http://solr.local:8983/solr/admin/cores"


def _request(**kwargs):
    values = {"check_status": True, "check_latency": True, "host": "solr.local", "port": "8983", "path": "/solr"}
    values.update(kwargs)
    return ProbeRequest(**values)


def _discover(response, request=None, settings=None):
    stub = StubHttpClient({ADMIN_URL: response})
    client = CoreDiscoveryClient(stub, settings or HttpSettings())
    return client.discover(request or _request()), stub


def test_first_core_keeps_document_order():
    body = '{"responseHeader": {"status": 0}, "status": {"zeta": {"name": "zeta"}, "alpha": {"name": "alpha"}}}'
    result, stub = _discover(HttpResponse(ok=True, status_code=200, text=body))
    assert result.ok is True
    assert result.core == "zeta"
    sent = stub.requests[0]
    assert sent.params == {"action": "STATUS", "wt": "json"}
    assert sent.auth is None


def test_credentials_are_attached_when_username_present():
    body = '{"status": {"core1": {}}}'
    _, stub = _discover(
        HttpResponse(ok=True, status_code=200, text=body),
        request=_request(username="admin", password="secret"),
    )
    assert stub.requests[0].auth == ("admin", "secret")


def test_no_cores_is_not_found():
    result, _ = _discover(HttpResponse(ok=True, status_code=200, text='{"status": {}}'))
    assert result.ok is False
    assert result.failure is ProbeFailure.NOT_FOUND
    assert result.failure.exit_code == 8


def test_unauthorized_is_auth_failure():
    result, _ = _discover(HttpResponse(ok=True, status_code=401, text="Unauthorized"))
    assert result.failure is ProbeFailure.AUTH
    assert result.message == "Invalid authentication."


@pytest.mark.parametrize("code", [403, 404, 500, 302])
def test_other_status_codes_are_http_failures(code):
    result, _ = _discover(HttpResponse(ok=True, status_code=code, text=""))
    assert result.failure is ProbeFailure.HTTP
    assert result.message == f"Response error ({code})."


@pytest.mark.parametrize("category", [ErrorCategory.DNS_ERROR, ErrorCategory.CONNECTION_REFUSED])
def test_unresolvable_or_refused_host_is_unknown_host(category):
    result, _ = _discover(HttpResponse(ok=False, error_message="connect failed", error_category=category))
    assert result.failure is ProbeFailure.UNKNOWN_HOST
    assert result.failure.exit_code == 28


def test_other_transport_failures_are_generic():
    result, _ = _discover(HttpResponse(ok=False, error_message="read timed out", error_category=ErrorCategory.TIMEOUT))
    assert result.failure is ProbeFailure.GENERIC
    assert result.message == "read timed out"


@pytest.mark.parametrize("body", ["<html>not json</html>", "[]", '{"responseHeader": {}}', '{"status": []}'])
def test_malformed_payload_is_generic_failure(body):
    result, _ = _discover(HttpResponse(ok=True, status_code=200, text=body))
    assert result.failure is ProbeFailure.GENERIC
    assert result.failure.exit_code == 1


def test_scheme_comes_from_settings():
    stub = StubHttpClient()
    client = CoreDiscoveryClient(stub, HttpSettings(scheme="https"))
    assert client.build_request(_request()).url == "https://solr.local:8983/solr/admin/cores"


def test_first_core_name_helper():
    assert first_core_name({"status": {"a": {}, "b": {}}}) == "a"
    assert first_core_name({"status": {}}) is None
    with pytest.raises(ValueError):
        first_core_name({"cores": {}})


def test_ipv6_literal_hosts_are_bracketed():
    client = CoreDiscoveryClient(StubHttpClient(), HttpSettings())
    assert client.build_request(_request(host="::1")).url == "http://[::1]:8983/solr/admin/cores"
    assert client.build_request(_request(host="[fe80::1]")).url == "http://[fe80::1]:8983/solr/admin/cores"
