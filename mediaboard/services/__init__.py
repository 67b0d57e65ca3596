"""Services layer"""

from .aggregator import DetailsFetchError, MediaAggregator
from .log_service import LogService
from .tmdb_service import ExternalTransportError, TMDBError, TMDBService
from .watchlist_store import IndexOutOfRange, ItemNotFound, WatchlistStore

__all__ = [
    "LogService",
    "TMDBService",
    "TMDBError",
    "ExternalTransportError",
    "MediaAggregator",
    "DetailsFetchError",
    "WatchlistStore",
    "IndexOutOfRange",
    "ItemNotFound",
]
