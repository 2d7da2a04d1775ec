from abc import abstractmethod
from typing import Any

from shared.clients.ClientInterface import ClientInterface
from shared.models.document import SearchResponse
from shared.models.errors import ApiError
from shared.models.result import Err, Ok, Result


class SearchClientInterface(ClientInterface):
    """Client for a case law search backend exposing an index bootstrap and a search endpoint."""

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        return "search"

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_bootstrap(self) -> str:
        """
        Returns the endpoint path which prepares the index for querying.

        Returns:
            str: The endpoint path (e.g. "/api/bootstrap")
        """
        pass

    @abstractmethod
    def _get_endpoint_search(self) -> str:
        """
        Returns the endpoint path for natural language search requests.

        Returns:
            str: The endpoint path (e.g. "/api/search")
        """
        pass

    ################ PAYLOAD BUILDER ##################
    @abstractmethod
    def get_search_payload(self, query: str) -> dict:
        """Build the backend-specific request body for a search request.

        Args:
            query (str): The natural language query, sent as-is.

        Returns:
            dict: JSON-serialisable request body.
        """
        pass

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    @abstractmethod
    def _parse_endpoint_search(self, response: Any) -> SearchResponse:
        """Convert the raw search response into a SearchResponse.

        Args:
            response (Any): The decoded JSON response body, not necessarily an object.

        Returns:
            SearchResponse: The ordered results.

        Raises:
            ValueError: If the body does not have the expected shape.
        """
        pass

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def do_bootstrap(self) -> Result[None]:
        """Ask the backend to make its index ready for querying.

        The response body of a successful call is ignored.

        Returns:
            Result[None]: Ok(None) on any 2xx status, Err(ApiError) otherwise.
        """
        try:
            await self.do_request(
                method="POST",
                endpoint=self._get_endpoint_bootstrap(),
                additional_headers={"Content-Type": "application/json"},
                raise_on_error=True,
            )
        except ApiError as e:
            return Err(e)
        return Ok(None)

    async def do_search(self, query: str) -> Result[SearchResponse]:
        """Run a natural language search.

        Args:
            query (str): The query text. Empty queries are sent unchanged.

        Returns:
            Result[SearchResponse]: Ok with the ranked results, Err(ApiError) on a failed request.
        """
        try:
            response = await self.do_request(
                method="POST",
                endpoint=self._get_endpoint_search(),
                json=self.get_search_payload(query),
                raise_on_error=True,
            )
        except ApiError as e:
            return Err(e)

        try:
            return Ok(self._parse_endpoint_search(response.json()))
        except ValueError as e:
            # covers undecodable JSON, a non-object body and pydantic validation errors
            self.logging.debug("Search response could not be parsed: %s", e)
            return Err(ApiError(status=response.status_code, body=response.text, endpoint=self._get_endpoint_search()))
