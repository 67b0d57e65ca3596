"""TMDB API service"""

from typing import Dict, Optional

import httpx

from ..schemas.media import MediaType
from .log_service import log_service

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"


class TMDBError(Exception):
    """Any failed TMDB call"""


class ExternalTransportError(TMDBError):
    """Network-level failure talking to TMDB"""


class TMDBStatusError(TMDBError):
    """TMDB answered with a non-success status"""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class TMDBService:
    """The Movie Database API integration"""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        # timeout=None waits indefinitely
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout), transport=transport
        )

    async def _request(self, endpoint: str, params: Dict = None) -> Dict:
        """Make request to TMDB API"""
        if params is None:
            params = {}

        params["api_key"] = self.api_key

        url = f"{self.base_url}/{endpoint}"

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            log_service.error(
                f"TMDB API error: {endpoint} returned {e.response.status_code}"
            )
            raise TMDBStatusError(
                f"TMDB returned {e.response.status_code} for {endpoint}",
                e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            log_service.error(f"TMDB API transport error on {endpoint}: {e!r}")
            raise ExternalTransportError(f"Could not reach TMDB: {e}") from e
        except ValueError as e:
            log_service.error(f"TMDB API returned invalid JSON for {endpoint}")
            raise TMDBError(f"Invalid JSON from TMDB for {endpoint}") from e

    async def get_trending(
        self, media_type: MediaType, time_window: str = "week"
    ) -> Dict:
        """Get trending content"""
        return await self._request(f"trending/{media_type.value}/{time_window}")

    async def search(self, media_type: MediaType, query: str, page: int = 1) -> Dict:
        """Search movies or TV shows"""
        return await self._request(
            f"search/{media_type.value}", {"query": query, "page": page}
        )

    async def get_details(self, media_type: MediaType, tmdb_id: str) -> Dict:
        """Get movie or TV show details"""
        return await self._request(f"{media_type.value}/{tmdb_id}")

    async def get_videos(self, media_type: MediaType, tmdb_id: str) -> Dict:
        """Get trailers, teasers and clips"""
        return await self._request(f"{media_type.value}/{tmdb_id}/videos")

    async def get_credits(self, media_type: MediaType, tmdb_id: str) -> Dict:
        """Get cast and crew"""
        return await self._request(f"{media_type.value}/{tmdb_id}/credits")

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()
