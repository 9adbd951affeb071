"""
OMDb (omdbapi.com) movie lookups.

`HttpOmdbClient` is the blocking client used by scripts; `AsyncOmdbClient` runs
the same calls off the event loop. Both raise `OmdbTransportError` when no HTTP
response arrives and `OmdbRemoteError` for error statuses and unusable payloads.
"""

from flix_backend.integrations.omdb.client import (
    OMDB_API_BASE_URL,
    AsyncOmdbClient,
    HttpOmdbClient,
    OmdbClientError,
    OmdbRemoteError,
    OmdbTransportError,
    resolve_api_key,
)

__all__ = [
    "OMDB_API_BASE_URL",
    "AsyncOmdbClient",
    "HttpOmdbClient",
    "OmdbClientError",
    "OmdbRemoteError",
    "OmdbTransportError",
    "resolve_api_key",
]
