"""Tests for ProjectCatalog (specs -> discovery -> ranking -> display order)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from project_launcher.exceptions import AmbiguousProjectError, ProjectNotFoundError
from project_launcher.models import SortMode
from project_launcher.services.catalog import ProjectCatalog
from project_launcher.storage.memory import InMemoryStore


@pytest.fixture
def catalog(home: Path, store: InMemoryStore, make_dirs: Callable[..., list[Path]]) -> ProjectCatalog:
    make_dirs(home / 'Dev', 'alpha', 'bravo', 'charlie')
    make_dirs(home / 'Work', 'Bravo')
    return ProjectCatalog(store, home)


async def _names(catalog: ProjectCatalog) -> list[str]:
    return [p.name for p in (await catalog.load()).projects]


@pytest.mark.asyncio
async def test_load_without_paths_is_empty(catalog: ProjectCatalog) -> None:
    view = await catalog.load()

    assert view.projects == []
    assert view.sort_mode == SortMode.FREQUENCY


@pytest.mark.asyncio
async def test_load_orders_by_frequency_with_pins_first(catalog: ProjectCatalog, home: Path) -> None:
    await catalog.path_specs.add_stored_path('~/Dev/*')
    charlie = str(home / 'Dev' / 'charlie')
    bravo = str(home / 'Dev' / 'bravo')
    await catalog.record_open(charlie)
    await catalog.record_open(charlie)
    await catalog.record_open(bravo)

    assert await _names(catalog) == ['charlie', 'bravo', 'alpha']

    await catalog.toggle_pin(str(home / 'Dev' / 'alpha'))
    assert await _names(catalog) == ['alpha', 'charlie', 'bravo']

    await catalog.reset_ranking(charlie)
    assert await _names(catalog) == ['alpha', 'bravo', 'charlie']


@pytest.mark.asyncio
async def test_move_uses_current_display_order(catalog: ProjectCatalog, home: Path) -> None:
    await catalog.path_specs.add_stored_path('~/Dev/*')
    await catalog.set_sort_mode(SortMode.MANUAL)

    assert await _names(catalog) == ['alpha', 'bravo', 'charlie']

    # Only the two swapped projects get a manual order; unordered ones sort after them
    await catalog.move(str(home / 'Dev' / 'charlie'), 'up')
    assert await _names(catalog) == ['charlie', 'bravo', 'alpha']

    await catalog.move(str(home / 'Dev' / 'charlie'), 'up')
    assert await _names(catalog) == ['charlie', 'bravo', 'alpha']

    await catalog.move(str(home / 'Dev' / 'alpha'), 'up')
    assert await _names(catalog) == ['charlie', 'alpha', 'bravo']


@pytest.mark.asyncio
async def test_base_directories_follow_configured_specs(catalog: ProjectCatalog, home: Path) -> None:
    await catalog.path_specs.add_stored_path('~/Work/*')
    await catalog.path_specs.add_stored_path('~/Dev/*')
    await catalog.path_specs.add_stored_path('~/Missing/*')

    assert await catalog.base_directories() == [str(home / 'Work'), str(home / 'Dev')]


class TestFind:
    """Tests for CatalogView.find()."""

    @pytest.mark.asyncio
    async def test_by_path_and_home_relative_path(self, catalog: ProjectCatalog, home: Path) -> None:
        await catalog.path_specs.add_stored_path('~/Dev/*')
        view = await catalog.load()

        assert view.find(str(home / 'Dev' / 'alpha')).name == 'alpha'
        assert view.find('~/Dev/charlie', home).name == 'charlie'

    @pytest.mark.asyncio
    async def test_by_name_case_insensitive(self, catalog: ProjectCatalog) -> None:
        await catalog.path_specs.add_stored_path('~/Dev/*')
        view = await catalog.load()

        assert view.find('ALPHA').name == 'alpha'

    @pytest.mark.asyncio
    async def test_ambiguous_name(self, catalog: ProjectCatalog) -> None:
        await catalog.path_specs.add_stored_path('~/Dev/*')
        await catalog.path_specs.add_stored_path('~/Work/*')
        view = await catalog.load()

        with pytest.raises(AmbiguousProjectError) as exc_info:
            view.find('bravo')
        assert len(exc_info.value.matches) == 2

    @pytest.mark.asyncio
    async def test_not_found(self, catalog: ProjectCatalog) -> None:
        view = await catalog.load()

        with pytest.raises(ProjectNotFoundError):
            view.find('zulu')
