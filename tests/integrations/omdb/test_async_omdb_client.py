from __future__ import annotations

import asyncio
import threading
from typing import Any

import pytest

from flix_backend.integrations.omdb.client import AsyncOmdbClient, OmdbRemoteError
from flix_backend.models.movies import SearchResultSet
from flix_backend.utils.exception_reporter import ExceptionReporter


def _run(coro):
    return asyncio.run(coro)


class _FakeResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        return self._payload


class _RoutingSession:
    """Answers by IMDb id / title so concurrent calls can be told apart."""

    def __init__(self, routes: dict[str, _FakeResponse]) -> None:
        self._routes = routes
        self._lock = threading.Lock()
        self.seen: list[str] = []

    def get(self, url: str, *, params=None, headers=None, timeout=None):  # noqa: ANN001
        key = (params or {}).get("i") or (params or {}).get("s")
        with self._lock:
            self.seen.append(key)
        return self._routes[key]


def _client(routes: dict[str, _FakeResponse]) -> tuple[AsyncOmdbClient, _RoutingSession]:
    session = _RoutingSession(routes)
    return AsyncOmdbClient(api_key="44ae6973", session=session), session


def test_find_resolves_with_payload() -> None:
    payload = {"imdbID": "tt0076759", "Title": "Star Wars: Episode IV - A New Hope", "Response": "True"}
    client, _ = _client({"tt0076759": _FakeResponse(200, payload)})

    assert _run(client.find("tt0076759")) == payload


def test_search_resolves_with_result_set() -> None:
    payload = {
        "Search": [{"Title": "Solo: A Star Wars Story", "Year": "2018", "imdbID": "tt3778644", "Type": "movie"}],
        "totalResults": "1",
        "Response": "True",
    }
    client, _ = _client({"solo": _FakeResponse(200, payload)})

    results = _run(client.search("solo"))

    assert isinstance(results, SearchResultSet)
    assert results.imdb_ids == ["tt3778644"]


def test_failure_surfaces_on_await_not_on_call() -> None:
    client, session = _client({"tt0076759": _FakeResponse(500, text="Server is broken")})

    coro = client.find("tt0076759")
    assert session.seen == []

    with pytest.raises(OmdbRemoteError, match="Server is broken"):
        _run(coro)


def test_unhandled_failure_reaches_exception_reporter() -> None:
    client, _ = _client({"tt0076759": _FakeResponse(500, text="Server is broken")})
    reporter = ExceptionReporter("log")

    async def scenario() -> None:
        try:
            await client.find("tt0076759")
        except OmdbRemoteError as exc:
            reporter(exc)

    _run(scenario())

    assert reporter.errors == ["Server is broken"]


def test_concurrent_calls_are_independent() -> None:
    good = {"imdbID": "tt0080684", "Title": "Star Wars: Episode V - The Empire Strikes Back", "Response": "True"}
    client, session = _client(
        {
            "tt0080684": _FakeResponse(200, good),
            "tt0000001": _FakeResponse(500, text="Server is broken"),
        }
    )

    async def scenario() -> list[Any]:
        return await asyncio.gather(
            client.find("tt0080684"),
            client.find("tt0000001"),
            return_exceptions=True,
        )

    ok, failed = _run(scenario())

    assert ok == good
    assert isinstance(failed, OmdbRemoteError)
    assert str(failed) == "Server is broken"
    assert sorted(session.seen) == ["tt0000001", "tt0080684"]


def test_package_exports_clients() -> None:
    import flix_backend.integrations.omdb as omdb

    assert omdb.AsyncOmdbClient is AsyncOmdbClient
    assert omdb.OmdbRemoteError is OmdbRemoteError
    assert omdb.OMDB_API_BASE_URL == "http://www.omdbapi.com/"
