"""Watchlist routes

Form endpoints used by the rendered pages, plus a JSON API addressed by
item id. The category is always part of the request.
"""

from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import PlainTextResponse, RedirectResponse

from ..schemas.media import MediaType
from ..schemas.watchlist import (
    Category,
    WatchlistItem,
    WatchlistItemCreate,
    WatchlistItemUpdate,
    WatchlistResponse,
)
from ..services.watchlist_store import IndexOutOfRange, ItemNotFound, WatchlistStore
from .deps import get_watchlist_store

router = APIRouter(tags=["watchlist"])
api_router = APIRouter(prefix="/api/watchlist", tags=["watchlist"])


def parse_index(value: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail=f"Invalid task id: {value!r}")


@router.post("/add-to-watchlist", response_class=PlainTextResponse)
def add_to_watchlist(
    mediaTitle: str = Form(...),
    mediaType: str = Form(...),
    store: WatchlistStore = Depends(get_watchlist_store),
):
    """Add a title from its details page"""
    store.append(Category.for_media_type(MediaType.parse(mediaType)), mediaTitle)
    return "OK"


@router.post("/addTask")
def add_task(
    task: str = Form(...),
    category: Category = Form(...),
    store: WatchlistStore = Depends(get_watchlist_store),
):
    """Add a free-text entry from a watchlist page"""
    store.append(category, task)
    return RedirectResponse(url=f"/{category.value}", status_code=303)


@router.post("/completeTask", response_class=PlainTextResponse)
def complete_task(
    taskId: str = Form(...),
    isCompleted: str = Form("false"),
    category: Category = Form(...),
    store: WatchlistStore = Depends(get_watchlist_store),
):
    """Mark the entry at a position completed or not"""
    try:
        store.toggle_complete(category, parse_index(taskId), isCompleted == "true")
    except IndexOutOfRange as e:
        raise HTTPException(status_code=400, detail=str(e))
    return "OK"


@router.post("/deleteTask", response_class=PlainTextResponse)
def delete_task(
    taskId: str = Form(...),
    category: Category = Form(...),
    store: WatchlistStore = Depends(get_watchlist_store),
):
    """Remove the entry at a position"""
    try:
        store.remove(category, parse_index(taskId))
    except IndexOutOfRange as e:
        raise HTTPException(status_code=400, detail=str(e))
    return "OK"


@api_router.get("/{category}", response_model=WatchlistResponse)
def list_items(category: Category, store: WatchlistStore = Depends(get_watchlist_store)):
    items = store.list(category)
    return WatchlistResponse(category=category, items=items, total=len(items))


@api_router.post("/{category}", response_model=WatchlistItem, status_code=201)
def create_item(
    category: Category,
    item_data: WatchlistItemCreate,
    store: WatchlistStore = Depends(get_watchlist_store),
):
    return store.append(category, item_data.name)


@api_router.patch("/{category}/items/{item_id}", response_model=WatchlistItem)
def update_item(
    category: Category,
    item_id: int,
    item_data: WatchlistItemUpdate,
    store: WatchlistStore = Depends(get_watchlist_store),
):
    try:
        return store.toggle_complete_by_id(category, item_id, item_data.completed)
    except ItemNotFound:
        raise HTTPException(status_code=404, detail="Watchlist item not found")


@api_router.delete("/{category}/items/{item_id}")
def delete_item(
    category: Category,
    item_id: int,
    store: WatchlistStore = Depends(get_watchlist_store),
):
    try:
        item = store.remove_by_id(category, item_id)
    except ItemNotFound:
        raise HTTPException(status_code=404, detail="Watchlist item not found")
    return {"message": f"Removed '{item.name}' from {category.value}"}
