"""Main FastAPI application"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from . import __version__
from .api import pages, system, watchlist
from .api.deps import render_error
from .config import settings
from .services.aggregator import MediaAggregator
from .services.log_service import log_service
from .services.tmdb_service import TMDBService
from .services.watchlist_store import WatchlistStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # The watchlist lives for the whole process and is never persisted
    app.state.watchlist = WatchlistStore()

    tmdb = None
    if settings.TMDB_API_KEY:
        tmdb = TMDBService(
            settings.TMDB_API_KEY,
            base_url=settings.TMDB_BASE_URL,
            timeout=settings.TMDB_TIMEOUT,
        )
        app.state.aggregator = MediaAggregator(tmdb)
    else:
        log_service.error("TMDB_API_KEY is not set; media pages are disabled")
        app.state.aggregator = None

    log_service.info("Mediaboard started")
    try:
        yield
    finally:
        if tmdb is not None:
            await tmdb.close()
        log_service.info("Mediaboard stopped")


app = FastAPI(
    title="Mediaboard",
    description="Trending, search and details from TMDB plus a watchlist",
    version=__version__,
    lifespan=lifespan,
)

# Mount static files
app.mount("/static", StaticFiles(directory=str(settings.STATIC_DIR)), name="static")

app.include_router(pages.router)
app.include_router(watchlist.router)
app.include_router(watchlist.api_router)
app.include_router(system.router)


@app.get("/favicon.ico", include_in_schema=False)
async def favicon():
    return FileResponse(settings.favicon_path, media_type="image/svg+xml")


# 404 Handler
@app.exception_handler(404)
async def custom_404_handler(request: Request, exc):
    """Custom 404 page; API routes keep JSON errors"""
    if request.url.path.startswith("/api/"):
        return await http_exception_handler(request, exc)
    return render_error(request, 404, "Page not found.")


# 503 Handler
@app.exception_handler(503)
async def custom_503_handler(request: Request, exc):
    """Error page when TMDB is not configured; API routes keep JSON errors"""
    if request.url.path.startswith("/api/"):
        return await http_exception_handler(request, exc)
    return render_error(request, 503, "Media pages are unavailable: TMDB is not configured.")
