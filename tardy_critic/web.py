"""
Tardy Critic - FastAPI application

Routes:
- GET /          poster grid, latest review and anniversary panels
- GET /about     static About page
- GET /api/page  the home page data as JSON
- GET /health    liveness check
"""
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse

from .config import Settings
from .core import ReviewLoader
from .rendering import render_about, render_home

logger = logging.getLogger(__name__)


def get_loader(request: Request) -> ReviewLoader:
    return request.app.state.loader


def create_app(
    settings: Optional[Settings] = None,
    loader: Optional[ReviewLoader] = None,
) -> FastAPI:
    """
    Application factory.

    Settings are resolved once here; every request builds its page data fresh
    through the shared loader.
    """
    settings = settings or Settings.from_env()
    app = FastAPI(title="Tardy Critic", version="0.1.0", docs_url=None, redoc_url=None)
    app.state.settings = settings
    app.state.loader = loader or ReviewLoader(settings)

    @app.get("/", response_class=HTMLResponse)
    def home(review_loader: ReviewLoader = Depends(get_loader)) -> HTMLResponse:
        page = review_loader.load_page()
        return HTMLResponse(render_home(page))

    @app.get("/about", response_class=HTMLResponse)
    def about() -> HTMLResponse:
        return HTMLResponse(render_about())

    @app.get("/api/page")
    def page_data(review_loader: ReviewLoader = Depends(get_loader)) -> Dict[str, Any]:
        page = review_loader.load_page()
        data = asdict(page)
        data["latest"] = asdict(page.latest) if page.latest else None
        return data

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    logger.info("App created (feed=%s, tmdb=%s)", settings.feed_url, bool(settings.tmdb_api_key))
    return app
