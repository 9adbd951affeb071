from __future__ import annotations

import os
from pathlib import Path

import pytest

from flix_backend.utils import env as env_mod


def test_load_env_prefers_explicit_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("OMDB_API_KEY=from-file\n", encoding="utf-8")
    monkeypatch.delenv("OMDB_API_KEY", raising=False)
    monkeypatch.setattr(env_mod, "REPO_ROOT", tmp_path / "missing")
    monkeypatch.chdir(tmp_path)

    loaded = env_mod.load_env(env_file=env_file)

    assert loaded == env_file
    assert os.environ["OMDB_API_KEY"] == "from-file"
    monkeypatch.delenv("OMDB_API_KEY")


def test_load_env_returns_none_without_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FLIX_ENV_FILE", raising=False)
    monkeypatch.setattr(env_mod, "REPO_ROOT", tmp_path / "missing")
    monkeypatch.chdir(tmp_path)

    assert env_mod.load_env() is None


def test_env_str_strips_and_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLIX_TEST_VALUE", "  hello ")
    monkeypatch.setenv("FLIX_TEST_BLANK", "   ")

    assert env_mod.env_str("FLIX_TEST_VALUE") == "hello"
    assert env_mod.env_str("FLIX_TEST_BLANK", "fallback") == "fallback"
    assert env_mod.env_str("FLIX_TEST_UNSET_VALUE") is None
