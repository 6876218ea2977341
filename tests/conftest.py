"""Shared fixtures: an isolated home directory and an in-memory store."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from project_launcher.storage.memory import InMemoryStore


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Fake home directory for `~` expansion."""
    home_dir = tmp_path / 'home'
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def make_dirs() -> Callable[..., list[Path]]:
    """Create directories under a base: make_dirs(base, 'a', 'b/c')."""

    def _make(base: Path, *names: str) -> list[Path]:
        created = []
        for name in names:
            path = base / name
            path.mkdir(parents=True, exist_ok=True)
            created.append(path)
        return created

    return _make
