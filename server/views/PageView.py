"""Derives everything the page template renders from the page state.

The template never inspects PageState directly, so presentation flags like
the theme stay out of the controller.
"""

from pydantic import BaseModel

from server.core.PageState import PageState
from server.views.DocumentView import DocumentView
from server.views.SearchForm import SearchForm
from shared.helper.sanitizer import sanitize_string
from shared.models.config import PageSettings


class ResultCard(BaseModel):
    index: int
    title: str
    snippet: str


class PageView(BaseModel):
    theme: str
    dark_mode_label: str
    refresh_seconds: float | int | None = None

    show_bootstrap_spinner: bool = False
    show_search_ui: bool = False
    show_search_spinner: bool = False
    show_results: bool = False

    query: str = ""
    search_form: SearchForm
    recent_searches: list[str] = []
    cards: list[ResultCard] = []
    current_page: int = 1
    total_pages: int = 0
    has_prev: bool = False
    has_next: bool = False

    error: dict | None = None
    document: DocumentView | None = None


def build_page_view(state: PageState, settings: PageSettings) -> PageView:
    """Build the view model for the current state.

    Args:
        state (PageState): The controller state.
        settings (PageSettings): The page settings.

    Returns:
        PageView: Flags and content for the page template.
    """
    document = DocumentView.from_result(state.selected_document) if state.selected_document else None
    cards = [
        ResultCard(
            index=state.page_offset + position,
            title=result.metadata.title,
            snippet=sanitize_string(result.metadata.pageContent),
        )
        for position, result in enumerate(state.paginated_results)
    ]

    return PageView(
        theme="dark" if state.is_dark_mode else "light",
        dark_mode_label="Light Mode" if state.is_dark_mode else "Dark Mode",
        refresh_seconds=settings.refresh_seconds if state.is_busy and document is None else None,
        show_bootstrap_spinner=state.is_bootstrapping,
        show_search_ui=state.is_index_ready and not state.is_bootstrapping,
        show_search_spinner=state.is_searching,
        show_results=bool(state.results) and bool(state.query),
        query=state.query,
        search_form=SearchForm(value=state.query, suggested_searches=settings.suggested_searches),
        recent_searches=list(state.recent_searches),
        cards=cards,
        current_page=state.current_page,
        total_pages=state.total_pages,
        has_prev=state.current_page > 1,
        has_next=state.current_page < state.total_pages,
        error=state.last_error if settings.recover_from_errors else None,
        document=document,
    )
