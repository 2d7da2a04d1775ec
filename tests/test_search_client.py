"""Tests for the search backend client (shared/clients/search)."""

import json

import httpx
import pytest

from shared.clients.search.SearchClientManager import SearchClientManager
from shared.clients.search.caselaw.SearchClientCaselaw import SearchClientCaselaw
from shared.models.errors import ApiError
from shared.models.result import Err, Ok


@pytest.mark.unit
class TestConfiguration:
    def test_missing_base_url_raises(self, helper_config, monkeypatch):
        monkeypatch.delenv("SEARCH_CASELAW_BASE_URL")
        with pytest.raises(ValueError, match="SEARCH_CASELAW_BASE_URL"):
            SearchClientCaselaw(helper_config=helper_config)

    def test_no_timeout_by_default(self, search_client):
        assert search_client.timeout is None

    def test_timeout_from_env(self, helper_config, monkeypatch):
        monkeypatch.setenv("SEARCH_TIMEOUT", "2.5")
        assert SearchClientCaselaw(helper_config=helper_config).timeout == 2.5

    def test_manager_loads_caselaw_engine(self, helper_config):
        client = SearchClientManager(helper_config=helper_config).get_client()
        assert isinstance(client, SearchClientCaselaw)
        assert client.get_engine_name() == "caselaw"
        assert client.get_client_type() == "search"

    def test_manager_rejects_unknown_engine(self, helper_config, monkeypatch):
        monkeypatch.setenv("SEARCH_ENGINE", "elastic")
        with pytest.raises(ValueError, match="Unsupported search engine"):
            SearchClientManager(helper_config=helper_config)


@pytest.mark.unit
@pytest.mark.asyncio
class TestRequests:
    async def test_request_before_boot_raises(self, search_client):
        with pytest.raises(RuntimeError, match="boot"):
            await search_client.do_search("anything")

    async def test_bootstrap_request_shape(self, search_client, backend):
        await search_client.boot()
        try:
            result = await search_client.do_bootstrap()
        finally:
            await search_client.close()

        assert result == Ok(None)
        (request,) = backend.requests_to("/api/bootstrap")
        assert request.method == "POST"
        assert request.url == "http://backend.test/api/bootstrap"
        assert request.headers["content-type"] == "application/json"
        assert request.content == b""

    async def test_search_sends_query_and_parses_results(self, search_client, backend):
        backend.set_results("Nixon cases", 3)
        await search_client.boot()
        try:
            result = await search_client.do_search("Nixon cases")
        finally:
            await search_client.close()

        assert isinstance(result, Ok)
        assert [r.metadata.title for r in result.value.results] == ["Case 0", "Case 1", "Case 2"]
        assert result.value.results[0].metadata.get_extra_fields() == {"court": "Supreme Court"}
        (request,) = backend.requests_to("/api/search")
        assert json.loads(request.content) == {"query": "Nixon cases"}

    async def test_empty_query_is_sent_as_is(self, search_client, backend):
        await search_client.boot()
        try:
            await search_client.do_search("")
        finally:
            await search_client.close()

        (request,) = backend.requests_to("/api/search")
        assert json.loads(request.content) == {"query": ""}

    async def test_error_status_becomes_api_error(self, search_client, backend):
        backend.set_error("broken", 500, {"error": "index offline"})
        await search_client.boot()
        try:
            result = await search_client.do_search("broken")
        finally:
            await search_client.close()

        assert isinstance(result, Err)
        assert result.error.status == 500
        assert result.error.body == {"error": "index offline"}
        assert result.error.endpoint == "/api/search"

    async def test_bootstrap_error(self, search_client, backend):
        backend.bootstrap_status = 503
        backend.bootstrap_body = {"error": "warming up"}
        await search_client.boot()
        try:
            result = await search_client.do_bootstrap()
        finally:
            await search_client.close()

        assert isinstance(result, Err)
        assert result.error.status == 503
        assert str(result.error) == "API request failed with status 503"

    async def test_non_json_error_body_falls_back_to_text(self, helper_config):
        transport = httpx.MockTransport(lambda request: httpx.Response(502, text="Bad Gateway"))
        client = SearchClientCaselaw(helper_config=helper_config, transport=transport)
        await client.boot()
        try:
            result = await client.do_search("q")
        finally:
            await client.close()

        assert result.error.status == 502
        assert result.error.body == "Bad Gateway"

    @pytest.mark.parametrize("body", [[], "ok", {"results": "none"}])
    async def test_malformed_success_body_becomes_api_error(self, search_client, backend, body):
        backend.search_responses["q"] = (200, body)
        await search_client.boot()
        try:
            result = await search_client.do_search("q")
        finally:
            await search_client.close()

        assert isinstance(result, Err)
        assert result.error.status == 200
        assert result.error.endpoint == "/api/search"

    async def test_transport_failure_becomes_status_zero(self, helper_config):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = SearchClientCaselaw(helper_config=helper_config, transport=httpx.MockTransport(refuse))
        await client.boot()
        try:
            result = await client.do_bootstrap()
        finally:
            await client.close()

        assert isinstance(result, Err)
        assert isinstance(result.error, ApiError)
        assert result.error.status == 0
        assert "connection refused" in result.error.body["detail"]

    async def test_api_key_is_sent_as_bearer_token(self, helper_config, backend, monkeypatch):
        monkeypatch.setenv("SEARCH_CASELAW_API_KEY", "secret")
        client = SearchClientCaselaw(helper_config=helper_config, transport=backend.transport())
        await client.boot()
        try:
            await client.do_bootstrap()
        finally:
            await client.close()

        assert backend.requests[0].headers["authorization"] == "Bearer secret"


@pytest.mark.unit
def test_document_keeps_opaque_fields():
    from shared.models.document import Document

    document = Document.model_validate(
        {"id": "us-418-683", "metadata": {"title": "United States v. Nixon", "pageContent": "...", "year": 1974}}
    )

    assert document.metadata.title == "United States v. Nixon"
    assert document.metadata.get_extra_fields() == {"year": 1974}
    assert document.model_extra == {"id": "us-418-683"}


@pytest.mark.unit
def test_search_result_is_a_document_projection():
    from shared.models.document import Document, SearchResult

    result = SearchResult.model_validate({"metadata": {"title": "Roe v. Wade"}, "content": "text", "score": 0.9})

    assert isinstance(result, Document)
    assert result.metadata.title == "Roe v. Wade"
    assert result.model_extra is None
