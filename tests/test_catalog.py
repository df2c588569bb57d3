import json
import logging

import pytest
import requests

from src.catalog import (
    IndexCatalogFetcher, MalformedCatalogError, normalize_index_entry, parse_index_catalog
)
from src.models import ErrorKind, IndexSummary

from conftest import make_response

ENDPOINT = "https://es.example.com:9243"
API_KEY = "c2VjcmV0OmtleQ=="


def fetcher_for(session):
    return IndexCatalogFetcher(session_factory=lambda: session)


# --- Normalización ---

def test_normalize_complete_entry():
    entry = {"index": "logs-1", "docs.count": "100", "store.size": "1.2mb", "health": "green", "status": "open"}
    assert normalize_index_entry(entry) == IndexSummary(
        name="logs-1", document_count="100", store_size="1.2mb", health="green", status="open"
    )


def test_normalize_missing_fields_use_defaults():
    summary = normalize_index_entry({})
    assert summary.name == ""
    assert summary.document_count == "0"
    assert summary.store_size == "N/A"
    assert summary.health == "N/A"
    assert summary.status == "N/A"


def test_normalize_null_fields_use_defaults():
    summary = normalize_index_entry({"index": None, "docs.count": None, "health": None})
    assert (summary.name, summary.document_count, summary.health) == ("", "0", "N/A")


def test_normalize_type_mismatches():
    summary = normalize_index_entry({"index": "a", "docs.count": 42, "store.size": {"bytes": 1}, "health": True, "status": ["open"]})
    assert summary.name == "a"
    assert summary.document_count == "42"
    assert summary.store_size == "N/A"
    assert summary.health == "N/A"
    assert summary.status == "N/A"


def test_normalize_non_object_entry():
    assert normalize_index_entry("logs-1") == IndexSummary()


def test_normalize_ignores_extra_fields():
    summary = normalize_index_entry({"index": "a", "pri": "1", "uuid": "xyz"})
    assert summary.name == "a"


# --- Parseo ---

def test_parse_rejects_invalid_json():
    with pytest.raises(MalformedCatalogError):
        parse_index_catalog("not json")


def test_parse_rejects_non_array():
    with pytest.raises(MalformedCatalogError, match="array"):
        parse_index_catalog('{"error": "nope"}')


def test_parse_keeps_input_order():
    names = ["zeta", "alpha", "mid", ".kibana"]
    indices = parse_index_catalog(json.dumps([{"index": name} for name in names]))
    assert [index.name for index in indices] == names


# --- Fetch ---

def test_fetch_round_trip(fake_session):
    body = [{"index": "logs-1", "docs.count": "100", "store.size": "1.2mb", "health": "green", "status": "open"}]
    fake_session.request.return_value = make_response(text=json.dumps(body))

    result = fetcher_for(fake_session).fetch(ENDPOINT, API_KEY)

    assert result.ok
    assert [index.model_dump() for index in result.indices] == [{
        "name": "logs-1", "document_count": "100", "store_size": "1.2mb", "health": "green", "status": "open"
    }]


def test_fetch_returns_one_record_per_element(fake_session):
    body = [{"index": f"idx-{i}", "docs.count": str(i)} for i in range(25)] + [{}, None]
    fake_session.request.return_value = make_response(text=json.dumps(body))

    result = fetcher_for(fake_session).fetch(ENDPOINT, API_KEY)

    assert result.ok
    assert len(result.indices) == 27
    assert [index.name for index in result.indices[:25]] == [f"idx-{i}" for i in range(25)]
    assert result.indices[-1] == IndexSummary()


def test_fetch_empty_array(fake_session):
    result = fetcher_for(fake_session).fetch(ENDPOINT, API_KEY)
    assert result.ok
    assert result.indices == []
    assert result.error is None


def test_fetch_request_shape(fake_session):
    fetcher_for(fake_session).fetch(ENDPOINT + "/", API_KEY)

    fake_session.request.assert_called_once()
    args, kwargs = fake_session.request.call_args
    assert args == ("GET", f"{ENDPOINT}/_cat/indices")
    assert kwargs["headers"]["Authorization"] == f"ApiKey {API_KEY}"
    assert kwargs["params"] == {"format": "json", "h": "index,docs.count,store.size,health,status"}
    assert kwargs["timeout"] == 30


def test_fetch_closes_session(fake_session):
    fetcher_for(fake_session).fetch(ENDPOINT, API_KEY)
    fake_session.close.assert_called_once()


@pytest.mark.parametrize("endpoint, credential", [
    (None, API_KEY), ("", API_KEY), ("   ", API_KEY),
    (ENDPOINT, None), (ENDPOINT, ""), (ENDPOINT, " \t"),
])
def test_fetch_missing_configuration_makes_no_request(fake_session, endpoint, credential):
    created = []

    def factory():
        created.append(fake_session)
        return fake_session

    result = IndexCatalogFetcher(session_factory=factory).fetch(endpoint, credential)

    assert not result.ok
    assert result.error.kind == ErrorKind.CONFIGURATION_MISSING
    assert "ES_ENDPOINT" in result.error.message
    assert result.indices == []
    assert created == []
    assert fake_session.request.call_count == 0


def test_fetch_relative_endpoint_is_configuration_error(fake_session):
    result = fetcher_for(fake_session).fetch("localhost:9200", API_KEY)
    assert result.error.kind == ErrorKind.CONFIGURATION_MISSING
    assert fake_session.request.call_count == 0


def test_fetch_http_error_is_transport_failure(fake_session, caplog):
    fake_session.request.return_value = make_response(
        status_code=401, reason="Unauthorized", text='{"error":"security_exception"}'
    )

    with caplog.at_level(logging.ERROR):
        result = fetcher_for(fake_session).fetch(ENDPOINT, API_KEY)

    assert result.error.kind == ErrorKind.TRANSPORT_FAILURE
    assert "HTTP 401 Unauthorized" in result.error.message
    assert "security_exception" in result.error.message
    assert result.indices == []
    assert fake_session.request.call_count == 1
    assert "Fallo al obtener los índices" in caplog.text


def test_fetch_connection_error_is_transport_failure(fake_session):
    fake_session.request.side_effect = requests.exceptions.ConnectTimeout("timed out")

    result = fetcher_for(fake_session).fetch(ENDPOINT, API_KEY)

    assert result.error.kind == ErrorKind.TRANSPORT_FAILURE
    assert "ConnectTimeout: timed out" in result.error.message
    assert result.indices == []
    fake_session.close.assert_called_once()


def test_fetch_malformed_body(fake_session, caplog):
    fake_session.request.return_value = make_response(text="not json")

    with caplog.at_level(logging.ERROR):
        result = fetcher_for(fake_session).fetch(ENDPOINT, API_KEY)

    assert result.error.kind == ErrorKind.MALFORMED_RESPONSE
    assert "error" in result.error.message.lower()
    assert result.indices == []
    assert "Error de conexión con Elasticsearch" in caplog.text


def test_fetch_success_logs_info(fake_session, caplog):
    fake_session.request.return_value = make_response(text='[{"index": "a"}]')

    with caplog.at_level(logging.INFO):
        fetcher_for(fake_session).fetch(ENDPOINT, API_KEY)

    assert "Índices obtenidos correctamente de Elasticsearch: 1" in caplog.text


def test_fetch_unparseable_endpoint_is_configuration_error(fake_session):
    result = fetcher_for(fake_session).fetch("http://[::1", API_KEY)

    assert result.error.kind == ErrorKind.CONFIGURATION_MISSING
    assert result.indices == []
    assert fake_session.request.call_count == 0


def test_fetch_unexpected_exception_becomes_error_result(fake_session, caplog):
    fake_session.request.side_effect = UnicodeEncodeError("latin-1", "密钥", 0, 2, "ordinal not in range(256)")

    with caplog.at_level(logging.ERROR):
        result = fetcher_for(fake_session).fetch(ENDPOINT, "密钥")

    assert result.error.kind == ErrorKind.TRANSPORT_FAILURE
    assert result.error.message.startswith("Error de conexión con Elasticsearch: ")
    assert "latin-1" in result.error.message
    assert result.indices == []
    assert "Traceback" in caplog.text
    fake_session.close.assert_called_once()


@pytest.mark.parametrize("status_code, reason", [(300, "Multiple Choices"), (304, "Not Modified")])
def test_fetch_redirect_status_is_transport_failure(fake_session, status_code, reason):
    fake_session.request.return_value = make_response(status_code=status_code, reason=reason, text="[]")

    result = fetcher_for(fake_session).fetch(ENDPOINT, API_KEY)

    assert result.error.kind == ErrorKind.TRANSPORT_FAILURE
    assert f"HTTP {status_code} {reason}" in result.error.message
    assert result.indices == []
