"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from fakes import FakeTagCodec
from tagsort.config.config import Config


@pytest.fixture
def codec() -> FakeTagCodec:
    return FakeTagCodec()


@pytest.fixture
def library(tmp_path: Path) -> Path:
    """Empty collection root."""

    root = tmp_path / "music"
    root.mkdir()
    return root


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import tagsort.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("TAGSORT_CONFIG", raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_config() -> Iterator[None]:
    """Reset the configuration singleton around every test."""

    Config.reset()
    try:
        yield None
    finally:
        Config.reset()
