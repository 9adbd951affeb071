from __future__ import annotations

from typing import Any

import requests

from flix_backend.utils.env import env_str

RELEASE_MANIFEST_URL = (
    "https://gist.githubusercontent.com/juanlizarazo/4b2d229ba483ca13b1a6d7bf3079dc8b/raw/"
    "228ac05e04118037be02c38d9b86945c1356a2e2/version.json"
)


class ReleaseManifestError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


def resolve_manifest_url(url: str | None = None) -> str:
    return (url or "").strip() or env_str("RELEASE_MANIFEST_URL", RELEASE_MANIFEST_URL)


def parse_release_version(payload: Any) -> str:
    if not isinstance(payload, dict):
        raise ReleaseManifestError("Release manifest is not a JSON object.")
    version = payload.get("version")
    if isinstance(version, (int, float)) and not isinstance(version, bool):
        return str(version)
    if isinstance(version, str) and version.strip():
        return version.strip()
    raise ReleaseManifestError("Release manifest missing version.")


def fetch_release_version(
    *,
    url: str | None = None,
    session: requests.Session | None = None,
    timeout_seconds: float = 10.0,
) -> str:
    """
    Fetch the published calculator version from the release manifest (`{"version": "..."}`).
    """

    session = session or requests.Session()
    manifest_url = resolve_manifest_url(url)
    try:
        resp = session.get(manifest_url, headers={"accept": "application/json"}, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise ReleaseManifestError(f"Release manifest request failed: {exc}") from exc

    if resp.status_code != 200:
        raise ReleaseManifestError(
            f"Release manifest request failed with HTTP {resp.status_code}.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:200],
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise ReleaseManifestError(
            "Release manifest returned non-JSON response.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:200],
        ) from exc
    return parse_release_version(payload)
