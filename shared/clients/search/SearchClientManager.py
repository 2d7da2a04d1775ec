import httpx

from shared.helper.HelperConfig import HelperConfig
from shared.clients.search.SearchClientInterface import SearchClientInterface


class SearchClientManager:
    """
    Manager class to handle the search client based on configuration.
    """

    def __init__(self, helper_config: HelperConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.helper_config = helper_config
        self.logging = helper_config.get_logger()
        self._transport = transport
        self.client = self._initialize_client()

    def _get_engine_from_env(self) -> str:
        """
        Reads the search engine from ENV configuration.

        Returns:
            str: The name of the search engine, capitalized (e.g. "Caselaw").

        Raises:
            ValueError: If the configured engine name is blank.
        """
        engine = self.helper_config.get_string_val("SEARCH_ENGINE", default="caselaw")
        if not engine.strip():
            raise ValueError("No search engine specified in configuration.")
        return engine.strip().lower().capitalize()

    def _initialize_client(self) -> SearchClientInterface:
        """
        Initializes the search client based on the engine specified in the configuration.

        Returns:
            SearchClientInterface: An instance of the search client.

        Raises:
            ValueError: If the specified engine has no client implementation.
        """
        engine = self._get_engine_from_env()
        className = f"SearchClient{engine}"
        try:
            module = __import__(
                f"shared.clients.search.{engine.lower()}.{className}",
                fromlist=[className],
            )
            client_class = getattr(module, className)
        except (ImportError, AttributeError) as e:
            raise ValueError(f"Unsupported search engine specified: '{engine}'. Error: {e}")

        client = client_class(helper_config=self.helper_config, transport=self._transport)
        self.logging.debug(f"Instantiated search client for engine: {engine}")
        return client

    def get_client(self) -> SearchClientInterface:
        """
        Returns the instantiated search client.

        Returns:
            SearchClientInterface: The search client instance.
        """
        return self.client
