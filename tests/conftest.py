from __future__ import annotations

from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from mediaboard.api import deps
from mediaboard.main import app
from mediaboard.services.tmdb_service import TMDBService
from mediaboard.services.watchlist_store import WatchlistStore

TMDB_TEST_BASE = "https://tmdb.test/3"


class FakeTMDB:
    """
    Routes TMDB paths (e.g. "movie/42/videos") to canned payloads.

    A route mapped to an int answers with that status; mapped to an
    exception class, the transport raises it. Unknown paths answer 404.
    """

    def __init__(self, routes: dict):
        self.routes = routes
        self.calls: list[httpx.Request] = []

    @property
    def called_paths(self) -> list[str]:
        return [self._path(request) for request in self.calls]

    @staticmethod
    def _path(request: httpx.Request) -> str:
        return request.url.path.split("/3/", 1)[1]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route = self.routes.get(self._path(request), 404)
        if isinstance(route, type) and issubclass(route, Exception):
            raise route("simulated failure", request=request)
        if isinstance(route, int):
            return httpx.Response(route, json={"status_message": "error"})
        return httpx.Response(200, json=route)

    def service(self) -> TMDBService:
        return TMDBService(
            "test-key", base_url=TMDB_TEST_BASE, transport=httpx.MockTransport(self.handler)
        )


@pytest.fixture
def fake_tmdb() -> Callable[[dict], FakeTMDB]:
    return FakeTMDB


@pytest.fixture
def store() -> WatchlistStore:
    return WatchlistStore()


@pytest.fixture
def client(store: WatchlistStore):
    """Test client with a fresh watchlist store"""
    app.dependency_overrides[deps.get_watchlist_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
