"""Rendered page routes (trending, search, details, watchlists)"""

import re
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from ..schemas.media import MediaRef, MediaType
from ..schemas.watchlist import Category
from ..services.aggregator import DetailsFetchError, MediaAggregator
from ..services.log_service import log_service
from ..services.tmdb_service import TMDBError
from ..services.watchlist_store import WatchlistStore
from .deps import get_aggregator, get_watchlist_store, render, render_error

router = APIRouter(tags=["pages"])

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_page(value: Optional[str]) -> int:
    """
    Page number from the query string, read from its leading digits
    ("2.5" and "3abc" give 2 and 3). No digits or a value < 1 means 1.
    """
    match = LEADING_INT.match(value or "")
    if match is None:
        return 1
    page = int(match.group(1))
    return page if page >= 1 else 1


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, aggregator: MediaAggregator = Depends(get_aggregator)):
    """Homepage - trending movies and TV shows"""
    try:
        trending_movies = await aggregator.fetch_trending(MediaType.MOVIE)
        trending_tv_shows = await aggregator.fetch_trending(MediaType.TV)
    except TMDBError as e:
        log_service.error(f"Failed to load trending: {e}")
        return render_error(request, 502, "Could not load trending titles.")

    return render(
        request,
        "index.html",
        {"trending_movies": trending_movies, "trending_tv_shows": trending_tv_shows},
    )


@router.get("/search", response_class=HTMLResponse)
async def quick_search(
    request: Request,
    search: str = "",
    aggregator: MediaAggregator = Depends(get_aggregator),
):
    """Quick movie search shown on the homepage"""
    try:
        result = await aggregator.search(search, MediaType.MOVIE, 1)
    except TMDBError as e:
        log_service.error(f"Quick search failed for '{search}': {e}")
        return render_error(request, 502, "Search is unavailable right now.")

    return render(request, "index.html", {"data": result, "query_search": search})


@router.get("/result", response_class=HTMLResponse)
async def search_results(
    request: Request,
    search: str = "",
    filter: str = "movie",
    page: Optional[str] = None,
    aggregator: MediaAggregator = Depends(get_aggregator),
):
    """Paginated search results for movies or TV shows"""
    media_type = MediaType.parse(filter)
    current_page = parse_page(page)

    try:
        result = await aggregator.search(search, media_type, current_page)
    except TMDBError as e:
        log_service.error(f"Search failed for '{search}': {e}")
        return render_error(request, 502, "Search is unavailable right now.")

    return render(
        request,
        "result.html",
        {
            "data": result,
            "query_search": search,
            "selected_filter": media_type.value,
            "current_page": result.current_page,
            "total_pages": result.total_pages,
        },
    )


@router.get("/details/{media_type}/{media_id}", response_class=HTMLResponse)
async def details(
    request: Request,
    media_type: str,
    media_id: str,
    aggregator: MediaAggregator = Depends(get_aggregator),
):
    """Details page with trailer and top-billed cast"""
    ref = MediaRef(media_type=MediaType.parse(media_type), id=media_id)

    try:
        media = await aggregator.fetch_details(ref)
    except DetailsFetchError:
        return render_error(request, 502, "Could not load this title.")

    return render(
        request,
        "details.html",
        {
            "media": media.details,
            "title": media.details.get("title") or media.details.get("name", ""),
            "youtube_url": media.trailer_url,
            "cast": media.cast,
            "media_type": ref.media_type.value,
        },
    )


@router.get("/movies", response_class=HTMLResponse)
async def movies_page(
    request: Request, store: WatchlistStore = Depends(get_watchlist_store)
):
    """Movie watchlist"""
    return render(
        request,
        "watchlist.html",
        {"tasks": store.list(Category.MOVIES), "category": Category.MOVIES.value},
    )


@router.get("/tvshows", response_class=HTMLResponse)
async def tvshows_page(
    request: Request, store: WatchlistStore = Depends(get_watchlist_store)
):
    """TV show watchlist"""
    return render(
        request,
        "watchlist.html",
        {"tasks": store.list(Category.TVSHOWS), "category": Category.TVSHOWS.value},
    )
