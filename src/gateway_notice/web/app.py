"""
FastAPI Application for gateway-notice.

Serves the interstitial page shown when the security gateway blocks a
request, plus a JSON endpoint exposing the same decision.
"""

from pathlib import Path
from typing import Any

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from gateway_notice import __version__
from gateway_notice.config import Settings, load_settings
from gateway_notice.web.routes import notice

# Module paths
WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Runtime settings. Loaded from the config file when omitted.
        transport: httpx transport for the collaborator services (tests).
    """
    app = FastAPI(
        title="gateway-notice",
        description="Block page and follow-up actions for gateway-blocked requests",
        version=__version__,
        docs_url="/api/docs",
        redoc_url=None,
    )
    app.state.settings = settings or load_settings()
    app.state.transport = transport

    templates = Jinja2Templates(directory=TEMPLATES_DIR)

    app.include_router(notice.router, prefix="/api", tags=["notice"])

    @app.get("/", response_class=HTMLResponse)
    async def block_page(request: Request) -> Any:
        """Render the block notice for the gateway's query parameters."""
        view = await notice.notice_for_request(request)
        if view.context.is_empty:
            return templates.TemplateResponse(
                request, "no_data.html", {"settings": view.settings}
            )
        return templates.TemplateResponse(
            request,
            "block_notice.html",
            {"view": view, "settings": view.settings, "decision": view.decision},
        )

    return app


def run_server(host: str = "127.0.0.1", port: int = 8000, settings: Settings | None = None) -> None:
    """Run the FastAPI server with uvicorn."""
    import uvicorn

    uvicorn.run(create_app(settings), host=host, port=port, log_level="info")
