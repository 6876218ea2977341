"""End-to-end tests for the project-launcher CLI."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from project_launcher.cli import main as cli_main
from project_launcher.config.cli import CliSettings

runner = CliRunner()


@pytest.fixture
def dev(home: Path, make_dirs: Callable[..., list[Path]]) -> Path:
    make_dirs(home / 'Dev', 'alpha', 'bravo', '.hidden')
    return home / 'Dev'


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, home: Path, monkeypatch: pytest.MonkeyPatch) -> CliSettings:
    """Point the CLI at a temporary store and home directory."""
    test_settings = CliSettings(DATA_DIR=tmp_path / 'data', _env_file=None)
    monkeypatch.setattr(cli_main, 'settings', test_settings)
    monkeypatch.setenv('HOME', str(home))
    return test_settings


def _invoke(*args: str):
    return runner.invoke(cli_main.app, list(args))


def test_paths_add_list_remove(dev: Path) -> None:
    result = _invoke('paths', 'add', '~/Dev/*')
    assert result.exit_code == 0, result.output
    assert 'Path added' in result.output

    result = _invoke('paths', 'add', '~/Missing')
    assert result.exit_code == 0, result.output
    assert 'directory not found' in result.output

    result = _invoke('paths', 'list')
    assert result.exit_code == 0, result.output
    assert '~/Dev/*  (Parent Folder)' in result.output
    assert '~/Missing  (Single Folder)' in result.output
    assert '[not found]' in result.output

    result = _invoke('paths', 'remove', '~/Missing')
    assert result.exit_code == 0, result.output

    result = _invoke('paths', 'remove', '~/Missing')
    assert result.exit_code == 1
    assert 'Path not configured' in result.output


def test_list_open_and_pin_update_ranking(dev: Path, isolated_settings: CliSettings) -> None:
    _invoke('paths', 'add', '~/Dev/*')

    result = _invoke('list')
    assert result.exit_code == 0, result.output
    assert 'Sort mode: frequency' in result.output
    assert 'alpha' in result.output
    assert '.hidden' not in result.output

    result = _invoke('open', 'bravo')
    assert result.exit_code == 0, result.output
    assert str(dev / 'bravo') in result.output

    result = _invoke('list', '--json')
    assert result.exit_code == 0, result.output
    view = json.loads(result.output)
    assert [p['name'] for p in view['projects']] == ['bravo', 'alpha']
    assert view['metadata'][str(dev / 'bravo')]['openCount'] == 1

    result = _invoke('pin', 'alpha')
    assert result.exit_code == 0, result.output
    assert 'Pinned alpha' in result.output

    view = json.loads(_invoke('list', '--json').output)
    assert [p['name'] for p in view['projects']] == ['alpha', 'bravo']

    # State lives in the configured store file
    assert isolated_settings.store_file.exists()


def test_reset_clears_open_count(dev: Path) -> None:
    _invoke('paths', 'add', '~/Dev/*')
    _invoke('open', 'alpha')

    result = _invoke('reset', 'alpha')
    assert result.exit_code == 0, result.output

    view = json.loads(_invoke('list', '--json').output)
    assert view['metadata'][str(dev / 'alpha')]['openCount'] == 0


def test_sort_mode_and_move(dev: Path) -> None:
    _invoke('paths', 'add', '~/Dev/*')

    assert _invoke('sort-mode').output.strip() == 'frequency'
    assert _invoke('sort-mode', 'manual').exit_code == 0
    assert _invoke('sort-mode').output.strip() == 'manual'
    assert _invoke('sort-mode', 'by-size').exit_code != 0

    result = _invoke('move', 'bravo', 'up')
    assert result.exit_code == 0, result.output

    view = json.loads(_invoke('list', '--json').output)
    assert [p['name'] for p in view['projects']] == ['bravo', 'alpha']

    assert _invoke('move', 'bravo', 'sideways').exit_code != 0


def test_sort_mode_reset_removes_stored_mode(isolated_settings: CliSettings) -> None:
    assert _invoke('sort-mode', 'recent').exit_code == 0
    assert json.loads(isolated_settings.store_file.read_text())['sortMode'] == 'recent'

    result = _invoke('sort-mode', '--reset')
    assert result.exit_code == 0, result.output
    assert 'reset to frequency' in result.output
    assert 'sortMode' not in json.loads(isolated_settings.store_file.read_text())
    assert _invoke('sort-mode').output.strip() == 'frequency'

    assert _invoke('sort-mode', 'manual', '--reset').exit_code != 0


def test_unknown_project_is_an_error(dev: Path) -> None:
    _invoke('paths', 'add', '~/Dev/*')

    result = _invoke('open', 'zulu')

    assert result.exit_code == 1
    assert 'No discovered project matches: zulu' in result.output


def test_create_in_first_base_directory(dev: Path) -> None:
    _invoke('paths', 'add', '~/Dev/*')

    result = _invoke('create', 'charlie')
    assert result.exit_code == 0, result.output
    assert (dev / 'charlie').is_dir()

    result = _invoke('create', 'charlie')
    assert result.exit_code == 1
    assert 'Folder already exists' in result.output

    result = _invoke('bases')
    assert result.output.splitlines() == [str(dev)]


def test_create_without_base_directories(tmp_path: Path) -> None:
    result = _invoke('create', 'charlie')

    assert result.exit_code == 1
    assert 'No existing base directories' in result.output
