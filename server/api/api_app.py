"""FastAPI application entry point for the case law search page.

Run with:
    uvicorn server.api.api_app:app --host 0.0.0.0 --port 8000 --workers 1

The page state lives in the process, so a single worker serves one page.
"""

import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from server.api.routers.HealthRouter import health_router
from server.api.routers.PageRouter import page_router
from server.core.PageController import PageController
from shared.clients.search.SearchClientInterface import SearchClientInterface
from shared.clients.search.SearchClientManager import SearchClientManager
from shared.helper.HelperConfig import HelperConfig
from shared.logging.logging_setup import setup_logging
from shared.models.config import PageSettings

logging = setup_logging()
app_version = os.getenv("APP_VERSION", "unknown")


def create_app(
    search_client: SearchClientInterface | None = None,
    settings: PageSettings | None = None,
) -> FastAPI:
    """Build the page application.

    Args:
        search_client (SearchClientInterface | None): Client for the search backend.
            Resolved from SEARCH_ENGINE when omitted.
        settings (PageSettings | None): Page settings. Read from the environment when omitted.

    Returns:
        FastAPI: The application. The index bootstrap is scheduled on startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # when the app starts
        helper_config = HelperConfig(logger=logging)

        client = search_client or SearchClientManager(helper_config=helper_config).get_client()
        await client.boot()

        app.state.page_controller = PageController(
            helper_config=helper_config,
            search_client=client,
            settings=settings,
        )
        # runs in the background, the page shows a spinner until it is done
        app.state.page_controller.ensure_bootstrap()
        logging.info("Case law search page ready.")

        # while the app is running...
        yield

        # when the app shuts down
        logging.info("Shutting down — closing search client...")
        await app.state.page_controller.close()
        await client.close()
        logging.info("Search client closed.")

    app = FastAPI(
        title="Case Law Search",
        description=(
            "Natural language search over legal case law. Renders the search page "
            "and talks to the search backend via POST /api/bootstrap and POST /api/search."
        ),
        version=app_version,
        lifespan=lifespan,
    )
    app.include_router(health_router)
    app.include_router(page_router)
    return app


app = create_app()


# Server Start
if __name__ == "__main__":
    import uvicorn

    logging.info(
        "Starting case law search page v%s from root dir: %s on port 8000...",
        app_version,
        os.environ.get("ROOT_DIR", os.getcwd()),
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)
