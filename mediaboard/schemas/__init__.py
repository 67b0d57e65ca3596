"""Pydantic schemas for validation"""

from .media import (
    CAST_LIMIT,
    SEARCH_PAGE_SIZE,
    AggregatedMedia,
    MediaRef,
    MediaType,
    SearchResultPage,
)
from .watchlist import (
    Category,
    WatchlistItem,
    WatchlistItemCreate,
    WatchlistItemUpdate,
    WatchlistResponse,
)

__all__ = [
    "CAST_LIMIT",
    "SEARCH_PAGE_SIZE",
    "AggregatedMedia",
    "MediaRef",
    "MediaType",
    "SearchResultPage",
    "Category",
    "WatchlistItem",
    "WatchlistItemCreate",
    "WatchlistItemUpdate",
    "WatchlistResponse",
]
