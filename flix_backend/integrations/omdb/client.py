from __future__ import annotations

import asyncio
from typing import Any, Mapping

import requests

from flix_backend.models.movies import SearchResultSet, parse_response_flag
from flix_backend.utils.env import env_str

OMDB_API_BASE_URL = "http://www.omdbapi.com/"
OMDB_API_VERSION = "1"


class OmdbClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


class OmdbTransportError(OmdbClientError):
    """The request never produced an HTTP response (DNS, connection, socket timeout)."""


class OmdbRemoteError(OmdbClientError):
    """OMDb answered, but not with a usable payload."""


def _require_api_key(api_key: str | None) -> str:
    resolved = (api_key or "").strip() or env_str("OMDB_API_KEY", "")
    if not resolved:
        raise RuntimeError("OMDB_API_KEY is not set.")
    return resolved


def resolve_api_key(api_key: str | None = None) -> str | None:
    """
    Best-effort API key resolution for callers that want to continue when the key is missing.
    """

    resolved = (api_key or "").strip() or env_str("OMDB_API_KEY", "")
    return resolved or None


def resolve_base_url(base_url: str | None = None) -> str:
    return (base_url or "").strip() or env_str("OMDB_API_BASE_URL", OMDB_API_BASE_URL)


_MESSAGE_BODY_LIMIT = 400


def _error_message_from_response(resp: requests.Response) -> str:
    # The body text is the most useful description OMDb (or a proxy in front of it) gives us.
    body = (resp.text or "").strip()
    if len(body) > _MESSAGE_BODY_LIMIT:
        return body[:_MESSAGE_BODY_LIMIT].rstrip() + "..."
    if body:
        return body
    return f"OMDb request failed with HTTP {resp.status_code}."


class HttpOmdbClient:
    """
    Thin OMDb wrapper: `search` by title, `find` by IMDb id.

    Every failure is raised to the caller as an `OmdbClientError`; nothing is retried,
    cached, or logged here.

    A session created here is owned by the client and released by `close()` (or by
    leaving a `with` block); a caller-supplied session is left open.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        session: requests.Session | None = None,
        base_url: str | None = None,
        api_version: str = OMDB_API_VERSION,
        timeout_seconds: float = 20.0,
    ) -> None:
        self._api_key = _require_api_key(api_key)
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._base_url = resolve_base_url(base_url)
        self._api_version = str(api_version)
        self._timeout_seconds = timeout_seconds

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> HttpOmdbClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request_json(self, query: Mapping[str, str]) -> dict[str, Any]:
        # OMDb expects `v` first and `apikey` last; dicts keep insertion order.
        params: dict[str, str] = {"v": self._api_version, **query, "apikey": self._api_key}
        headers = {"accept": "application/json"}

        try:
            resp = self._session.get(self._base_url, params=params, headers=headers, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise OmdbTransportError(f"OMDb request failed: {exc}") from exc

        if resp.status_code != 200:
            raise OmdbRemoteError(
                _error_message_from_response(resp),
                status_code=resp.status_code,
                body_snippet=(resp.text or "")[:_MESSAGE_BODY_LIMIT],
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise OmdbRemoteError(
                "OMDb returned non-JSON response.",
                status_code=resp.status_code,
                body_snippet=(resp.text or "")[:_MESSAGE_BODY_LIMIT],
            ) from exc

        if not isinstance(payload, dict):
            raise OmdbRemoteError(
                "OMDb returned unexpected JSON shape (not an object).",
                status_code=resp.status_code,
            )

        if not parse_response_flag(payload.get("Response")):
            error = payload.get("Error")
            message = error.strip() if isinstance(error, str) and error.strip() else "OMDb returned Response=False."
            raise OmdbRemoteError(message, status_code=resp.status_code, body_snippet=(resp.text or "")[:_MESSAGE_BODY_LIMIT])

        return payload

    def search(self, title: str) -> SearchResultSet:
        title = str(title or "").strip()
        if not title:
            raise ValueError("Search title is empty.")

        payload = self._request_json({"s": title})
        if not isinstance(payload.get("Search"), list):
            raise OmdbRemoteError("OMDb search response missing Search list.", status_code=200)
        try:
            return SearchResultSet.from_payload(payload)
        except ValueError as exc:
            raise OmdbRemoteError(f"OMDb search response is malformed: {exc}", status_code=200) from exc

    def find(self, imdb_id: str) -> dict[str, Any]:
        """
        Fetch the full record for one title. Returns the JSON object as sent by OMDb.
        """

        imdb_id = str(imdb_id or "").strip()
        if not imdb_id:
            raise ValueError("IMDb id is empty.")
        return self._request_json({"i": imdb_id})


class AsyncOmdbClient:
    """
    Awaitable facade over `HttpOmdbClient`.

    Calls run on a worker thread; errors surface when the coroutine is awaited.
    Calls are independent and may be gathered concurrently.
    """

    def __init__(self, client: HttpOmdbClient | None = None, **client_kwargs: Any) -> None:
        self._client = client or HttpOmdbClient(**client_kwargs)

    @property
    def client(self) -> HttpOmdbClient:
        return self._client

    def close(self) -> None:
        self._client.close()

    async def search(self, title: str) -> SearchResultSet:
        return await asyncio.to_thread(self._client.search, title)

    async def find(self, imdb_id: str) -> dict[str, Any]:
        return await asyncio.to_thread(self._client.find, imdb_id)
