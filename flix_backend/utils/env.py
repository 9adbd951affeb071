from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[2]


def env_file_candidates(env_file: str | Path | None = None) -> list[Path]:
    """
    Ordered `.env` locations: an explicit path (or `FLIX_ENV_FILE`), then the repo root, then CWD.
    """

    candidates: list[Path] = []
    explicit = env_file or os.getenv("FLIX_ENV_FILE")
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.extend([REPO_ROOT / ".env", Path.cwd() / ".env"])
    return candidates


def load_env(*, override: bool = False, env_file: str | Path | None = None) -> Path | None:
    for path in env_file_candidates(env_file):
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None


def env_str(name: str, default: str | None = None) -> str | None:
    value = (os.getenv(name) or "").strip()
    return value or default
