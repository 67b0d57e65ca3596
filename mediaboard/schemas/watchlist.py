"""Watchlist schemas"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from .media import MediaType


class Category(str, Enum):
    """Watchlist partition"""

    MOVIES = "movies"
    TVSHOWS = "tvshows"

    @classmethod
    def for_media_type(cls, media_type: MediaType) -> "Category":
        return cls.MOVIES if media_type == MediaType.MOVIE else cls.TVSHOWS


class WatchlistItem(BaseModel):
    """Watchlist entry"""

    id: int
    name: str
    completed: bool = False


class WatchlistItemCreate(BaseModel):
    """Schema for appending an item through the JSON API"""

    name: str = Field(..., min_length=1)


class WatchlistItemUpdate(BaseModel):
    """Schema for toggling completion through the JSON API"""

    completed: bool


class WatchlistResponse(BaseModel):
    """Items of one category in display order"""

    category: Category
    items: List[WatchlistItem]
    total: int
