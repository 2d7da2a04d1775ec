"""
Pytest configuration and shared fixtures for the case law search page tests.
"""

import json
import logging
import os
import tempfile
import time
from typing import Callable

import httpx
import pytest

# Set test environment variables before importing the app
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="caselaw-search-logs-")
os.environ["SEARCH_ENGINE"] = "caselaw"
os.environ["SEARCH_CASELAW_BASE_URL"] = "http://backend.test"
os.environ.pop("SEARCH_CASELAW_API_KEY", None)
os.environ.pop("SEARCH_TIMEOUT", None)

from server.core.PageController import PageController  # noqa: E402
from shared.clients.search.caselaw.SearchClientCaselaw import SearchClientCaselaw  # noqa: E402
from shared.helper.HelperConfig import HelperConfig  # noqa: E402
from shared.logging.logging_setup import ColorLogger  # noqa: E402
from shared.models.config import PageSettings  # noqa: E402
from shared.models.document import SearchResult  # noqa: E402


def make_result_payload(number: int) -> dict:
    """Raw JSON of one search hit as the backend sends it."""
    return {
        "metadata": {
            "title": f"Case {number}",
            "pageContent": f"Opinion text of case {number}.",
            "court": "Supreme Court",
        },
        "content": f"Full content of case {number}.",
    }


def make_results(count: int) -> tuple[SearchResult, ...]:
    return tuple(SearchResult.model_validate(make_result_payload(i)) for i in range(count))


class FakeBackend:
    """Stands in for the search backend behind an httpx.MockTransport.

    Search responses are looked up by query; unknown queries return no results.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.bootstrap_status = 200
        self.bootstrap_body: dict = {"status": "ready"}
        self.search_responses: dict[str, tuple[int, object]] = {}

    def set_results(self, query: str, count: int) -> None:
        self.search_responses[query] = (200, {"results": [make_result_payload(i) for i in range(count)]})

    def set_error(self, query: str, status: int, body: dict) -> None:
        self.search_responses[query] = (status, body)

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/bootstrap":
            return httpx.Response(self.bootstrap_status, json=self.bootstrap_body)
        if request.url.path == "/api/search":
            query = json.loads(request.content)["query"]
            status, body = self.search_responses.get(query, (200, {"results": []}))
            return httpx.Response(status, json=body)
        return httpx.Response(404, json={"detail": "not found"})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def logger() -> ColorLogger:
    return ColorLogger(logging.getLogger("caselaw_search_page.tests"))


@pytest.fixture
def helper_config(logger) -> HelperConfig:
    return HelperConfig(logger=logger)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def search_client(helper_config, backend) -> SearchClientCaselaw:
    """A search client wired to the fake backend. Tests must ``await search_client.boot()``."""
    return SearchClientCaselaw(helper_config=helper_config, transport=backend.transport())


@pytest.fixture
def make_controller(helper_config, search_client) -> Callable[..., PageController]:
    def _make(**settings) -> PageController:
        return PageController(
            helper_config=helper_config,
            search_client=search_client,
            settings=PageSettings(**settings),
        )

    return _make


def wait_for_state(client, predicate: Callable[[dict], bool], attempts: int = 200) -> dict:
    """Poll GET /state of a TestClient until ``predicate`` holds.

    Backend calls run as background tasks on the app's event loop, so the
    test thread has to wait for them.
    """
    state: dict = {}
    for _ in range(attempts):
        state = client.get("/state").json()
        if predicate(state):
            return state
        time.sleep(0.01)
    raise AssertionError(f"State never reached the expected condition: {state}")
