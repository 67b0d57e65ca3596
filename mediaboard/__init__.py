"""Mediaboard - TMDB browser with an in-memory watchlist"""

__version__ = "1.0.0"
