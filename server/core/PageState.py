"""Application state of the search page and the pure transitions between states.

Every transition has the shape ``(PageState, Event) -> PageState`` and never
touches anything besides its arguments. The controller is the only caller.
"""

import math
from typing import Callable

from pydantic import BaseModel, ConfigDict

from shared.models.document import SearchResult


class PageState(BaseModel):
    """Everything the page renders from. Replaced wholesale on every transition."""

    model_config = ConfigDict(frozen=True)

    # settings, fixed for the lifetime of the controller
    page_size: int = 6
    recent_searches_limit: int = 5

    is_bootstrapping: bool = False
    is_index_ready: bool = False
    query: str = ""
    results: tuple[SearchResult, ...] = ()
    is_searching: bool = False
    selected_document: SearchResult | None = None
    recent_searches: tuple[str, ...] = ()
    is_dark_mode: bool = False
    current_page: int = 1
    last_error: dict | None = None

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.results) / self.page_size)

    @property
    def page_offset(self) -> int:
        """Index of the first result on the current page."""
        return (self.current_page - 1) * self.page_size

    @property
    def paginated_results(self) -> tuple[SearchResult, ...]:
        return self.results[self.page_offset:self.current_page * self.page_size]

    @property
    def is_busy(self) -> bool:
        return self.is_bootstrapping or self.is_searching


##########################################
################ EVENTS ##################
##########################################

class Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class BootstrapStarted(Event):
    pass


class BootstrapCompleted(Event):
    pass


class BootstrapFailed(Event):
    error: dict


class QuerySubmitted(Event):
    query: str


class QueryReplayed(Event):
    query: str


class SearchStarted(Event):
    query: str


class SearchResultsApplied(Event):
    query: str
    results: tuple[SearchResult, ...]


class SearchFailed(Event):
    query: str
    error: dict


class DocumentSelected(Event):
    document: SearchResult


class SelectionCleared(Event):
    pass


class NextPageRequested(Event):
    pass


class PrevPageRequested(Event):
    pass


class DarkModeToggled(Event):
    pass


class ResultsCleared(Event):
    pass


##########################################
############## TRANSITIONS ###############
##########################################

def start_bootstrap(state: PageState, event: BootstrapStarted) -> PageState:
    return state.model_copy(update={"is_bootstrapping": True})


def complete_bootstrap(state: PageState, event: BootstrapCompleted) -> PageState:
    return state.model_copy(update={"is_bootstrapping": False, "is_index_ready": True, "last_error": None})


def fail_bootstrap(state: PageState, event: BootstrapFailed) -> PageState:
    # the index stays unusable, the search UI remains hidden
    return state.model_copy(update={"is_bootstrapping": False, "last_error": event.error})


def submit_query(state: PageState, event: QuerySubmitted) -> PageState:
    return state.model_copy(update={"query": event.query, "current_page": 1})


def replay_query(state: PageState, event: QueryReplayed) -> PageState:
    # replaying a recent search keeps the current page
    return state.model_copy(update={"query": event.query})


def start_search(state: PageState, event: SearchStarted) -> PageState:
    return state.model_copy(update={"is_searching": True})


def apply_search_results(state: PageState, event: SearchResultsApplied) -> PageState:
    results = tuple(event.results)
    last_page = max(math.ceil(len(results) / state.page_size), 1)
    return state.model_copy(
        update={
            "results": results,
            "is_searching": False,
            "current_page": min(max(state.current_page, 1), last_page),
            "recent_searches": _remember_search(state.recent_searches, event.query, state.recent_searches_limit),
            "last_error": None,
        }
    )


def fail_search(state: PageState, event: SearchFailed) -> PageState:
    return state.model_copy(update={"is_searching": False, "last_error": event.error})


def select_document(state: PageState, event: DocumentSelected) -> PageState:
    return state.model_copy(update={"selected_document": event.document})


def clear_selection(state: PageState, event: SelectionCleared) -> PageState:
    return state.model_copy(update={"selected_document": None})


def next_page(state: PageState, event: NextPageRequested) -> PageState:
    if state.current_page >= state.total_pages:
        return state
    return state.model_copy(update={"current_page": state.current_page + 1})


def prev_page(state: PageState, event: PrevPageRequested) -> PageState:
    if state.current_page <= 1:
        return state
    return state.model_copy(update={"current_page": state.current_page - 1})


def toggle_dark_mode(state: PageState, event: DarkModeToggled) -> PageState:
    return state.model_copy(update={"is_dark_mode": not state.is_dark_mode})


def clear_results(state: PageState, event: ResultsCleared) -> PageState:
    return state.model_copy(update={"query": "", "results": ()})


def _remember_search(recent: tuple[str, ...], query: str, limit: int) -> tuple[str, ...]:
    """Prepend a new query and keep at most ``limit`` entries. Known queries keep their position."""
    if query in recent:
        return recent
    return (query, *recent[:limit - 1])


_TRANSITIONS: dict[type[Event], Callable[[PageState, Event], PageState]] = {
    BootstrapStarted: start_bootstrap,
    BootstrapCompleted: complete_bootstrap,
    BootstrapFailed: fail_bootstrap,
    QuerySubmitted: submit_query,
    QueryReplayed: replay_query,
    SearchStarted: start_search,
    SearchResultsApplied: apply_search_results,
    SearchFailed: fail_search,
    DocumentSelected: select_document,
    SelectionCleared: clear_selection,
    NextPageRequested: next_page,
    PrevPageRequested: prev_page,
    DarkModeToggled: toggle_dark_mode,
    ResultsCleared: clear_results,
}


def apply_event(state: PageState, event: Event) -> PageState:
    """Dispatch an event to its transition.

    Raises:
        TypeError: If no transition is registered for the event type.
    """
    transition = _TRANSITIONS.get(type(event))
    if transition is None:
        raise TypeError(f"No transition registered for event {type(event).__name__}.")
    return transition(state, event)
