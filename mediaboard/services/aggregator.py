"""Media aggregation service

Combines the TMDB details, videos and credits lookups into one result for
the details page. Only the details lookup is required; the videos and
credits lookups degrade to an absent trailer or cast on failure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from ..schemas.media import (
    CAST_LIMIT,
    AggregatedMedia,
    MediaRef,
    MediaType,
    SearchResultPage,
)
from .log_service import log_service
from .tmdb_service import TMDBError, TMDBService

TRAILER_URL_TEMPLATE = "https://www.youtube.com/watch?v={key}"


class DetailsFetchError(Exception):
    """The primary details lookup failed"""

    def __init__(self, ref: MediaRef, message: str):
        super().__init__(message)
        self.ref = ref


class StageOutcome(str, Enum):
    FULL = "full"
    DEGRADED = "degraded"


@dataclass
class StageResult:
    outcome: StageOutcome
    value: Any = None


def trailer_url_for(key: str) -> str:
    return TRAILER_URL_TEMPLATE.format(key=key)


def find_trailer(videos: List[Dict]) -> Optional[Dict]:
    """First video of type 'Trailer', in listing order"""
    return next(
        (
            video
            for video in videos
            if isinstance(video, dict) and video.get("type") == "Trailer"
        ),
        None,
    )


def listing(payload: Any, key: str) -> Optional[List]:
    """The list under `key`, or None when the payload is not shaped that way"""
    value = payload.get(key) if isinstance(payload, dict) else None
    return value if isinstance(value, list) else None


class MediaAggregator:
    """Trending, search and details lookups on top of TMDBService"""

    def __init__(self, tmdb: TMDBService):
        self.tmdb = tmdb

    async def fetch_trending(self, category: MediaType) -> List[Dict]:
        """Weekly trending movies or TV shows"""
        data = await self.tmdb.get_trending(category, "week")
        return data.get("results", [])

    async def search(
        self, query: str, filter: MediaType, page: int = 1
    ) -> SearchResultPage:
        """
        Single search call. `page` is sent as-is, even past the last page;
        TMDB then answers with an empty result list.
        """
        media_type = MediaType.TV if filter == MediaType.TV else MediaType.MOVIE
        data = await self.tmdb.search(media_type, query, page)

        return SearchResultPage.build(
            items=data.get("results", []),
            total_results=data.get("total_results") or 0,
            current_page=page,
        )

    async def fetch_details(self, ref: MediaRef) -> AggregatedMedia:
        """
        Aggregate details, trailer and cast for one title.

        Raises:
            DetailsFetchError: the details lookup failed. The secondary
                lookups are not attempted.
        """
        details = await self._fetch_primary(ref)
        trailer = await self._fetch_trailer(ref)
        cast = await self._fetch_cast(ref)

        log_service.info(
            f"Details for {ref.media_type.value}:{ref.id} "
            f"(trailer={trailer.outcome.value}, cast={cast.outcome.value})"
        )

        return AggregatedMedia(details=details, trailer_url=trailer.value, cast=cast.value)

    async def _fetch_primary(self, ref: MediaRef) -> Dict:
        try:
            details = await self.tmdb.get_details(ref.media_type, ref.id)
        except TMDBError as e:
            log_service.error(
                f"Details lookup failed for {ref.media_type.value}:{ref.id}: {e}"
            )
            raise DetailsFetchError(ref, f"Could not load details: {e}") from e

        if not isinstance(details, dict):
            log_service.error(
                f"Details lookup for {ref.media_type.value}:{ref.id} returned "
                f"{type(details).__name__}, expected an object"
            )
            raise DetailsFetchError(ref, "Could not load details: malformed response")
        return details

    async def _fetch_trailer(self, ref: MediaRef) -> StageResult:
        try:
            videos = await self.tmdb.get_videos(ref.media_type, ref.id)
        except TMDBError as e:
            log_service.warning(
                f"Video lookup failed for {ref.media_type.value}:{ref.id}: {e}"
            )
            return StageResult(StageOutcome.DEGRADED)

        results = listing(videos, "results")
        if results is None:
            log_service.warning(
                f"Video lookup for {ref.media_type.value}:{ref.id} had no results list"
            )
            return StageResult(StageOutcome.DEGRADED)

        trailer = find_trailer(results)
        if trailer is None or not trailer.get("key"):
            return StageResult(StageOutcome.FULL)

        return StageResult(StageOutcome.FULL, trailer_url_for(trailer["key"]))

    async def _fetch_cast(self, ref: MediaRef) -> StageResult:
        try:
            credits = await self.tmdb.get_credits(ref.media_type, ref.id)
        except TMDBError as e:
            log_service.warning(
                f"Credits lookup failed for {ref.media_type.value}:{ref.id}: {e}"
            )
            return StageResult(StageOutcome.DEGRADED)

        cast = listing(credits, "cast")
        if cast is None:
            log_service.warning(
                f"Credits lookup for {ref.media_type.value}:{ref.id} had no cast list"
            )
            return StageResult(StageOutcome.DEGRADED)

        members = [member for member in cast if isinstance(member, dict)]
        return StageResult(StageOutcome.FULL, members[:CAST_LIMIT])
