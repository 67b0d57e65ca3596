"""
Tests for the watchlist form endpoints and JSON API.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from mediaboard.schemas.watchlist import Category


def _names(store, category):
    return [item.name for item in store.list(category)]


class TestFormEndpoints:
    @pytest.mark.parametrize(
        "media_type, category",
        [("movie", Category.MOVIES), ("tv", Category.TVSHOWS)],
    )
    def test_add_to_watchlist_routes_by_media_type(self, client: TestClient, store, media_type, category):
        response = client.post(
            "/add-to-watchlist", data={"mediaTitle": "Arrival", "mediaType": media_type}
        )

        assert response.status_code == 200
        assert _names(store, category) == ["Arrival"]

    def test_add_task_redirects_to_category_page(self, client: TestClient, store):
        response = client.post(
            "/addTask",
            data={"task": "Dark", "category": "tvshows"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/tvshows"
        assert _names(store, Category.TVSHOWS) == ["Dark"]
        assert store.list(Category.MOVIES) == []

    def test_add_task_rejects_unknown_category(self, client: TestClient, store):
        response = client.post("/addTask", data={"task": "Dark", "category": "books"})

        assert response.status_code == 422

    def test_complete_task(self, client: TestClient, store):
        store.append(Category.MOVIES, "Heat")

        response = client.post(
            "/completeTask",
            data={"taskId": "0", "isCompleted": "true", "category": "movies"},
        )

        assert response.status_code == 200
        assert store.list(Category.MOVIES)[0].completed is True

    @pytest.mark.parametrize("task_id", ["1", "-1", "abc"])
    def test_complete_task_rejects_bad_index(self, client: TestClient, store, task_id):
        store.append(Category.MOVIES, "Heat")

        response = client.post(
            "/completeTask",
            data={"taskId": task_id, "isCompleted": "true", "category": "movies"},
        )

        assert response.status_code == 400
        assert store.list(Category.MOVIES)[0].completed is False

    def test_delete_task_shifts_positions(self, client: TestClient, store):
        for name in ("A", "B", "C"):
            store.append(Category.TVSHOWS, name)

        response = client.post("/deleteTask", data={"taskId": "0", "category": "tvshows"})

        assert response.status_code == 200
        assert _names(store, Category.TVSHOWS) == ["B", "C"]

    def test_delete_task_rejects_bad_index(self, client: TestClient, store):
        store.append(Category.TVSHOWS, "A")

        response = client.post("/deleteTask", data={"taskId": "5", "category": "tvshows"})

        assert response.status_code == 400
        assert _names(store, Category.TVSHOWS) == ["A"]


class TestJsonApi:
    def test_create_and_list(self, client: TestClient):
        created = client.post("/api/watchlist/movies", json={"name": "Heat"})

        assert created.status_code == 201
        assert created.json()["completed"] is False

        listing = client.get("/api/watchlist/movies").json()
        assert listing["total"] == 1
        assert listing["items"][0]["name"] == "Heat"

    def test_update_and_delete_by_id(self, client: TestClient, store):
        store.append(Category.MOVIES, "A")
        target = store.append(Category.MOVIES, "B")
        store.remove(Category.MOVIES, 0)

        updated = client.patch(
            f"/api/watchlist/movies/items/{target.id}", json={"completed": True}
        )
        assert updated.status_code == 200
        assert updated.json()["completed"] is True

        deleted = client.delete(f"/api/watchlist/movies/items/{target.id}")
        assert deleted.status_code == 200
        assert store.list(Category.MOVIES) == []

    def test_unknown_id_returns_json_404(self, client: TestClient):
        response = client.delete("/api/watchlist/tvshows/items/999")

        assert response.status_code == 404
        assert response.json() == {"detail": "Watchlist item not found"}

    def test_unknown_category_is_rejected(self, client: TestClient):
        response = client.get("/api/watchlist/books")

        assert response.status_code == 422
