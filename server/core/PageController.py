"""Page controller — owns the page state and orchestrates all backend calls.

Bootstrap runs once per controller. Searches are fire-and-forget tasks:
overlapping searches are neither de-duplicated nor cancelled, so the
response that resolves last decides the displayed results.
"""

import asyncio
from typing import Coroutine

from server.core.PageState import (
    BootstrapCompleted,
    BootstrapFailed,
    BootstrapStarted,
    DarkModeToggled,
    DocumentSelected,
    Event,
    NextPageRequested,
    PageState,
    PrevPageRequested,
    QueryReplayed,
    QuerySubmitted,
    ResultsCleared,
    SearchFailed,
    SearchResultsApplied,
    SearchStarted,
    SelectionCleared,
    apply_event,
)
from shared.clients.search.SearchClientInterface import SearchClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.models.config import PageSettings
from shared.models.document import SearchResponse
from shared.models.errors import ApiError
from shared.models.result import Result


class PageController:
    """Single owner of the page state. All changes go through PageState transitions."""

    def __init__(
        self,
        helper_config: HelperConfig,
        search_client: SearchClientInterface,
        settings: PageSettings | None = None,
    ) -> None:
        self.logging = helper_config.get_logger()
        self._settings = settings if settings is not None else helper_config.get_page_settings()
        self._search_client = search_client
        self._state = PageState(
            page_size=self._settings.page_size,
            recent_searches_limit=self._settings.recent_searches_limit,
        )
        self._bootstrap_task: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()

    ##########################################
    ################ GETTER ##################
    ##########################################

    def get_state(self) -> PageState:
        return self._state

    def get_settings(self) -> PageSettings:
        return self._settings

    def get_pending_tasks(self) -> set[asyncio.Task]:
        return set(self._tasks)

    ##########################################
    ############### BOOTSTRAP ################
    ##########################################

    def ensure_bootstrap(self) -> asyncio.Task:
        """Schedule the index bootstrap unless it was scheduled before.

        Returns:
            asyncio.Task: The one bootstrap task of this controller.
        """
        if self._bootstrap_task is None:
            self._bootstrap_task = self._spawn(self.do_bootstrap())
        return self._bootstrap_task

    async def do_bootstrap(self) -> Result[None]:
        """Prepare the backend index and open the search UI on success.

        Returns:
            Result[None]: The outcome of the bootstrap request.
        """
        self._dispatch(BootstrapStarted())
        self.logging.info("Bootstrapping search index...")

        result = await self._search_client.do_bootstrap()
        if result.is_ok:
            self._dispatch(BootstrapCompleted())
            self.logging.info("Search index is ready.", color="green")
        else:
            self._handle_failure(
                "Bootstrap",
                result.error,
                BootstrapFailed(error=result.error.to_dict()),
            )
        return result

    ##########################################
    ################ SEARCH ##################
    ##########################################

    def submit_search(self, query: str) -> asyncio.Task | None:
        """Search from the search form. Starts again at page 1.

        Args:
            query (str): The query text, sent as-is.

        Returns:
            asyncio.Task | None: The running search, or None while the index is not ready.
        """
        if not self._is_search_allowed(query):
            return None
        self._dispatch(QuerySubmitted(query=query))
        return self._spawn(self.do_search(query))

    def replay_search(self, query: str) -> asyncio.Task | None:
        """Search again for a recent query. The current page is kept.

        Args:
            query (str): A query from the recent searches list.

        Returns:
            asyncio.Task | None: The running search, or None while the index is not ready.
        """
        if not self._is_search_allowed(query):
            return None
        self._dispatch(QueryReplayed(query=query))
        return self._spawn(self.do_search(query))

    async def do_search(self, query: str) -> Result[SearchResponse]:
        """Run a search and apply its results.

        Args:
            query (str): The query text.

        Returns:
            Result[SearchResponse]: The outcome of the search request.
        """
        self._dispatch(SearchStarted(query=query))
        self.logging.info("Searching — query=%r", query[:80])

        result = await self._search_client.do_search(query)
        if result.is_ok:
            results = tuple(result.value.results)
            self._dispatch(SearchResultsApplied(query=query, results=results))
            self.logging.info("Search complete — query=%r results=%d", query[:80], len(results))
        else:
            self._handle_failure(
                "Search",
                result.error,
                SearchFailed(query=query, error=result.error.to_dict()),
            )
        return result

    ##########################################
    ############### NAVIGATION ###############
    ##########################################

    def select_result(self, index: int) -> PageState:
        """Open the detail view for a result.

        Args:
            index (int): Position of the result in the full result list.

        Returns:
            PageState: The new state.

        Raises:
            IndexError: If there is no result at that position.
        """
        results = self._state.results
        if index < 0 or index >= len(results):
            raise IndexError(f"No search result at index {index} (results: {len(results)}).")
        return self._dispatch(DocumentSelected(document=results[index]))

    def clear_selection(self) -> PageState:
        return self._dispatch(SelectionCleared())

    def next_page(self) -> PageState:
        return self._dispatch(NextPageRequested())

    def prev_page(self) -> PageState:
        return self._dispatch(PrevPageRequested())

    def toggle_dark_mode(self) -> PageState:
        return self._dispatch(DarkModeToggled())

    def clear_results(self) -> PageState:
        return self._dispatch(ResultsCleared())

    ##########################################
    ############### LIFECYCLE ################
    ##########################################

    async def close(self) -> None:
        """Cancel backend calls which are still in flight."""
        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
            self.logging.info("Cancelled %d pending backend call(s).", len(pending))

    ##########################################
    ############### HELPERS ##################
    ##########################################

    def _dispatch(self, event: Event) -> PageState:
        self._state = apply_event(self._state, event)
        self.logging.debug("Applied %s", type(event).__name__)
        return self._state

    def _is_search_allowed(self, query: str) -> bool:
        # the search UI is only mounted once the index is ready, stale forms are ignored
        if self._state.is_index_ready:
            return True
        self.logging.warning("Search index is not ready yet, ignoring query=%r", query[:80], color="yellow")
        return False

    def _spawn(self, coro: Coroutine) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _handle_failure(self, action: str, error: ApiError, event: Event) -> None:
        """Log a failed backend call and apply the failure policy.

        With recovery disabled the in-progress flag is left set, the page
        keeps showing its spinner and the error is only visible in the log.
        """
        self.logging.error(
            "%s request to %s failed with status %d: %s",
            action,
            error.endpoint or "backend",
            error.status,
            error.body,
        )
        if self._settings.recover_from_errors:
            self._dispatch(event)
        else:
            self.logging.warning("%s stays in progress, no retry is attempted.", action, color="yellow")
