"""
Shared route dependencies and template rendering.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.templating import Jinja2Templates

from ..config import settings
from ..services.aggregator import MediaAggregator
from ..services.watchlist_store import WatchlistStore

templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))
templates.env.globals["image_base"] = "https://image.tmdb.org/t/p/w500"


def get_aggregator(request: Request) -> MediaAggregator:
    """Aggregator built at startup; unavailable without a TMDB API key"""
    aggregator: Optional[MediaAggregator] = getattr(
        request.app.state, "aggregator", None
    )
    if aggregator is None:
        raise HTTPException(status_code=503, detail="TMDB API key not configured")
    return aggregator


def get_watchlist_store(request: Request) -> WatchlistStore:
    """The process-wide watchlist store"""
    return request.app.state.watchlist


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    """Render a template with the active nav entry (path without leading slash)"""
    context = dict(context or {})
    context.setdefault("active_page", request.url.path[1:])
    return templates.TemplateResponse(request, name, context, status_code=status_code)


def render_error(request: Request, status_code: int, message: str):
    return render(
        request,
        "error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )
