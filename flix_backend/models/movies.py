from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _as_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    return None


def _summary_str(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"Search entry field {key!r} is not a string: {value!r}")


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        raw = value.strip().replace(",", "")
        if raw.isdigit():
            return int(raw)
    return None


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def parse_response_flag(value: Any) -> bool:
    """
    OMDb reports success as the string "True"/"False" in the `Response` key.
    """

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


@dataclass(frozen=True)
class MovieSummary:
    """
    One entry of an OMDb `Search` list. Field values are kept verbatim; a present
    field that is not a string is rejected with `ValueError`.
    """

    title: str | None
    year: str | None
    imdb_id: str | None
    type: str | None
    poster: str | None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> MovieSummary:
        return cls(
            title=_summary_str(payload, "Title"),
            year=_summary_str(payload, "Year"),
            imdb_id=_summary_str(payload, "imdbID"),
            type=_summary_str(payload, "Type"),
            poster=_summary_str(payload, "Poster"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class SearchResultSet:
    items: tuple[MovieSummary, ...]
    total_results: int | None
    response: bool
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def imdb_ids(self) -> list[str]:
        return [item.imdb_id for item in self.items if item.imdb_id]

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> SearchResultSet:
        entries = payload.get("Search") or []
        if not isinstance(entries, list):
            raise ValueError("Search is not a list.")
        items: list[MovieSummary] = []
        for position, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise ValueError(f"Search entry {position} is not an object: {entry!r}")
            items.append(MovieSummary.from_payload(entry))
        return cls(
            items=tuple(items),
            total_results=_as_int(payload.get("totalResults")),
            response=parse_response_flag(payload.get("Response")),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class MovieRecord:
    """
    Typed view over an OMDb lookup (`?i=`) payload.

    The client hands back the raw JSON object; this is for callers that want
    attribute access and parsed scores.
    """

    imdb_id: str | None
    title: str | None
    year: str | None = None
    rated: str | None = None
    released: str | None = None
    runtime: str | None = None
    genre: str | None = None
    director: str | None = None
    writer: str | None = None
    actors: str | None = None
    plot: str | None = None
    language: str | None = None
    country: str | None = None
    awards: str | None = None
    poster: str | None = None
    metascore: int | None = None
    imdb_rating: float | None = None
    imdb_votes: int | None = None
    type: str | None = None
    response: bool = True

    @property
    def genres(self) -> tuple[str, ...]:
        return _split_list(self.genre)

    @property
    def cast(self) -> tuple[str, ...]:
        return _split_list(self.actors)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> MovieRecord:
        return cls(
            imdb_id=_as_str(payload.get("imdbID")),
            title=_as_str(payload.get("Title")),
            year=_as_str(payload.get("Year")),
            rated=_as_str(payload.get("Rated")),
            released=_as_str(payload.get("Released")),
            runtime=_as_str(payload.get("Runtime")),
            genre=_as_str(payload.get("Genre")),
            director=_as_str(payload.get("Director")),
            writer=_as_str(payload.get("Writer")),
            actors=_as_str(payload.get("Actors")),
            plot=_as_str(payload.get("Plot")),
            language=_as_str(payload.get("Language")),
            country=_as_str(payload.get("Country")),
            awards=_as_str(payload.get("Awards")),
            poster=_as_str(payload.get("Poster")),
            metascore=_as_int(payload.get("Metascore")),
            imdb_rating=_as_float(payload.get("imdbRating")),
            imdb_votes=_as_int(payload.get("imdbVotes")),
            type=_as_str(payload.get("Type")),
            response=parse_response_flag(payload.get("Response")),
        )


def _split_list(value: str | None) -> tuple[str, ...]:
    if not value or value == "N/A":
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())
