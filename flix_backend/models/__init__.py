"""
Domain models shared across scripts and services.
"""

from flix_backend.models.movies import MovieRecord, MovieSummary, SearchResultSet

__all__ = [
    "MovieRecord",
    "MovieSummary",
    "SearchResultSet",
]
