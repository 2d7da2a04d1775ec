from typing import Any

import httpx

from shared.clients.search.SearchClientInterface import SearchClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.models.config import EnvConfig
from shared.models.document import SearchResponse


class SearchClientCaselaw(SearchClientInterface):
    def __init__(self, helper_config: HelperConfig, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(helper_config=helper_config, transport=transport)
        self._base_url = self.get_config_val("BASE_URL", default=None, val_type="string")
        self._api_key = self.get_config_val("API_KEY", default="", val_type="string")

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "Caselaw"

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        return [
            EnvConfig(env_key="BASE_URL", val_type="string", default=None),
            EnvConfig(env_key="API_KEY", val_type="string", default=""),
        ]

    ################ AUTH ##################
    def _get_auth_header(self) -> dict:
        if self._api_key:
            return {"Authorization": f"Bearer {self._api_key}"}
        else:
            return {}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        return self._base_url

    def _get_endpoint_bootstrap(self) -> str:
        return "/api/bootstrap"

    def _get_endpoint_search(self) -> str:
        return "/api/search"

    ################ PAYLOAD BUILDER ##################
    def get_search_payload(self, query: str) -> dict:
        return {"query": query}

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    def _parse_endpoint_search(self, response: Any) -> SearchResponse:
        if not isinstance(response, dict):
            raise ValueError(f"Expected a JSON object from the search endpoint, got {type(response).__name__}.")
        # only the results array is used, anything else in the body is ignored
        return SearchResponse(results=response.get("results") or [])
