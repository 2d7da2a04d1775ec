"""Page router — renders the search page and maps its form posts onto the page controller.

Every mutating route answers with 303 See Other back to the page, so a
browser reload never re-submits a search.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from server.core.PageController import PageController
from server.views.PageView import build_page_view

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent.parent / "templates"))

page_router = APIRouter(tags=["Page"])


def get_page_controller(request: Request) -> PageController:
    """Return the page controller created during application startup."""
    return request.app.state.page_controller


def _back_to_page() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


##########################################
################ RENDER ##################
##########################################

@page_router.get("/", response_class=HTMLResponse)
async def render_page(request: Request, controller: PageController = Depends(get_page_controller)):
    """Render the page for the current state.

    While the bootstrap or a search is in flight the page refreshes itself
    so the spinner is replaced as soon as the backend answers.
    """
    view = build_page_view(controller.get_state(), controller.get_settings())
    return templates.TemplateResponse(request, "page.html", {"view": view})


@page_router.get("/state")
async def get_page_state(controller: PageController = Depends(get_page_controller)) -> JSONResponse:
    """Return a JSON snapshot of the page state."""
    state = controller.get_state()
    content = state.model_dump(mode="json")
    content["total_pages"] = state.total_pages
    return JSONResponse(content=content)


##########################################
################ SEARCH ##################
##########################################

@page_router.post("/search")
async def submit_search(
    query: str = Form(""),
    controller: PageController = Depends(get_page_controller),
) -> RedirectResponse:
    """Submit a query from the search form or a suggestion. Starts again at page 1.

    Ignored until the index is ready, the redirect then shows the spinner again.
    """
    controller.submit_search(query)
    return _back_to_page()


@page_router.post("/recent")
async def replay_recent_search(
    term: str = Form(...),
    controller: PageController = Depends(get_page_controller),
) -> RedirectResponse:
    """Replay a recent search. The current page is kept. Ignored until the index is ready."""
    controller.replay_search(term)
    return _back_to_page()


@page_router.post("/results/clear")
async def clear_results(controller: PageController = Depends(get_page_controller)) -> RedirectResponse:
    controller.clear_results()
    return _back_to_page()


##########################################
############### NAVIGATION ###############
##########################################

@page_router.post("/page/next")
async def next_page(controller: PageController = Depends(get_page_controller)) -> RedirectResponse:
    controller.next_page()
    return _back_to_page()


@page_router.post("/page/prev")
async def prev_page(controller: PageController = Depends(get_page_controller)) -> RedirectResponse:
    controller.prev_page()
    return _back_to_page()


@page_router.post("/documents/back")
async def leave_document(controller: PageController = Depends(get_page_controller)) -> RedirectResponse:
    controller.clear_selection()
    return _back_to_page()


@page_router.post("/documents/{index}")
async def select_document(index: int, controller: PageController = Depends(get_page_controller)) -> RedirectResponse:
    """Open the detail view of the result at ``index`` in the full result list.

    Raises:
        HTTPException: 404 if there is no result at that position.
    """
    try:
        controller.select_result(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _back_to_page()


@page_router.post("/dark-mode")
async def toggle_dark_mode(controller: PageController = Depends(get_page_controller)) -> RedirectResponse:
    controller.toggle_dark_mode()
    return _back_to_page()
