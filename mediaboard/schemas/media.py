"""Media lookup schemas"""

import math
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

SEARCH_PAGE_SIZE = 20
CAST_LIMIT = 10


class MediaType(str, Enum):
    """TMDB media type, used as the path segment of every lookup"""

    MOVIE = "movie"
    TV = "tv"

    @classmethod
    def parse(cls, value: Optional[str]) -> "MediaType":
        """Anything other than 'movie' is treated as TV"""
        return cls.MOVIE if value == cls.MOVIE.value else cls.TV


class MediaRef(BaseModel):
    """Lookup target for the details pipeline"""

    media_type: MediaType
    id: str

    model_config = ConfigDict(frozen=True)


class AggregatedMedia(BaseModel):
    """Primary details plus optional trailer and cast"""

    details: Dict[str, Any]
    trailer_url: Optional[str] = None
    cast: Optional[List[Dict[str, Any]]] = None  # At most CAST_LIMIT entries


class SearchResultPage(BaseModel):
    """One page of search results with the computed page count"""

    items: List[Dict[str, Any]] = []
    total_results: int = Field(0, ge=0)
    total_pages: int = Field(0, ge=0)
    page_size: int = SEARCH_PAGE_SIZE
    current_page: int = Field(1, ge=1)

    @classmethod
    def build(
        cls, items: List[Dict[str, Any]], total_results: int, current_page: int
    ) -> "SearchResultPage":
        return cls(
            items=items,
            total_results=total_results,
            total_pages=math.ceil(total_results / SEARCH_PAGE_SIZE),
            current_page=current_page,
        )

    @model_validator(mode="after")
    def _check_total_pages(self):
        if self.total_pages != math.ceil(self.total_results / self.page_size):
            raise ValueError("total_pages does not match total_results")
        return self
