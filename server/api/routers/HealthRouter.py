"""Liveness endpoint for container orchestration."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

health_router = APIRouter(tags=["Health"])


@health_router.get("/healthz")
async def healthcheck(request: Request) -> JSONResponse:
    """Report that the page server is up and whether the search index is ready.

    Args:
        request (Request): The incoming request (carries app state).

    Returns:
        JSONResponse: status, index readiness and app version.
    """
    state = request.app.state.page_controller.get_state()
    return JSONResponse(
        content={
            "status": "ok",
            "index_ready": state.is_index_ready,
            "bootstrapping": state.is_bootstrapping,
            "version": request.app.version,
        }
    )
