#!/usr/bin/env python3
"""
Command-line interface for project-launcher.

Lists discovered projects in ranked order and records usage (opens, pins,
manual moves, resets). Launching editors or terminals is left to the caller:
`project-launcher open` only records that a project was opened.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

import attrs
import typer

from project_launcher.cli.logger import CLILogger
from project_launcher.config.base import BaseLauncherSettings
from project_launcher.config.cli import settings
from project_launcher.exceptions import ProjectLauncherError
from project_launcher.models import SortMode
from project_launcher.services.catalog import CatalogView, ProjectCatalog
from project_launcher.services.create import ProjectCreator
from project_launcher.services.path_specs import describe_path_spec
from project_launcher.storage.local import JsonFileStore
from project_launcher.types import MoveDirection

app = typer.Typer(
    name='project-launcher',
    help='Discover, rank and manage local projects',
    add_completion=False,
)
paths_app = typer.Typer(help='Manage configured project paths (e.g. ~/Developer/*)')
app.add_typer(paths_app, name='paths')


# ==============================================================================
# Shared State (immutable)
# ==============================================================================


@attrs.define(frozen=True)
class LauncherState:
    """Services wired to the configured store file for one command invocation."""

    settings: BaseLauncherSettings
    store: JsonFileStore
    catalog: ProjectCatalog
    logger: CLILogger


def _build_state(verbose: bool) -> LauncherState:
    store = JsonFileStore(settings.store_file)
    return LauncherState(
        settings=settings,
        store=store,
        catalog=ProjectCatalog(store),
        logger=CLILogger(verbose=verbose or settings.VERBOSE),
    )


def _validate_direction(value: str) -> MoveDirection:
    """Validate and narrow move direction for typer callback."""
    if value == 'up':
        return 'up'
    if value == 'down':
        return 'down'
    raise typer.BadParameter("Must be 'up' or 'down'")


def _run(command: Callable[[LauncherState], Awaitable[None]], verbose: bool) -> None:
    """Run an async command body, turning domain errors into exit code 1."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    state = _build_state(verbose)
    try:
        asyncio.run(command(state))
    except ProjectLauncherError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


def _print_view(view: CatalogView) -> None:
    if not view.projects:
        typer.secho('No projects found.', fg=typer.colors.YELLOW)
        typer.echo('Add a path with: project-launcher paths add ~/Developer/*')
        return

    width = max(len(project.name) for project in view.projects)
    for project in view.projects:
        meta = view.metadata.get(project.path)
        pinned = meta is not None and meta.pinned
        opens = meta.open_count if meta is not None else 0
        marker = '*' if pinned else ' '
        typer.echo(f'{marker} {project.name:<{width}}  {project.path}  ', nl=False)
        typer.secho(f'opened {opens}x', dim=True)


# ==============================================================================
# Project Commands
# ==============================================================================


@app.command('list')
def list_projects(
    as_json: bool = typer.Option(False, '--json', help='Print the catalog as JSON'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """List discovered projects in display order (pinned first)."""

    async def _list(state: LauncherState) -> None:
        view = await state.catalog.load(state.logger)
        if as_json:
            typer.echo(view.model_dump_json(indent=2, by_alias=True, exclude_none=True))
            return
        typer.secho(f'Sort mode: {view.sort_mode}', bold=True)
        _print_view(view)

    _run(_list, verbose)


@app.command('bases')
def list_base_directories(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """List existing base directories (targets for `create`)."""

    async def _bases(state: LauncherState) -> None:
        for directory in await state.catalog.base_directories():
            typer.echo(directory)

    _run(_bases, verbose)


@app.command('open')
def open_project(
    project: str = typer.Argument(..., help='Project path or name'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Record that a project was opened (raises its frequency/recent rank)."""

    async def _open(state: LauncherState) -> None:
        view = await state.catalog.load(state.logger)
        target = view.find(project)
        await state.catalog.record_open(target.path)
        typer.echo(target.path)

    _run(_open, verbose)


@app.command('pin')
def pin_project(
    project: str = typer.Argument(..., help='Project path or name'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Toggle whether a project is pinned to the top."""

    async def _pin(state: LauncherState) -> None:
        view = await state.catalog.load(state.logger)
        target = view.find(project)
        pinned = await state.catalog.toggle_pin(target.path)
        typer.secho(f'✓ {"Pinned" if pinned else "Unpinned"} {target.name}', fg=typer.colors.GREEN)

    _run(_pin, verbose)


@app.command('reset')
def reset_project(
    project: str = typer.Argument(..., help='Project path or name'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Reset a project's open count to zero."""

    async def _reset(state: LauncherState) -> None:
        view = await state.catalog.load(state.logger)
        target = view.find(project)
        await state.catalog.reset_ranking(target.path)
        typer.secho(f'✓ Ranking reset for {target.name}', fg=typer.colors.GREEN)

    _run(_reset, verbose)


@app.command('move')
def move_project(
    project: str = typer.Argument(..., help='Project path or name'),
    direction: str = typer.Argument(..., help='up or down', callback=_validate_direction),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Move a project one step up or down in manual order."""

    async def _move(state: LauncherState) -> None:
        view = await state.catalog.load(state.logger)
        target = view.find(project)
        if view.sort_mode != SortMode.MANUAL:
            await state.logger.warning(
                f'Sort mode is {view.sort_mode}; the new order applies once you run: '
                f'project-launcher sort-mode {SortMode.MANUAL}'
            )
        await state.catalog.move(target.path, _validate_direction(direction))  # narrows str for the type checker
        typer.secho(f'✓ Moved {target.name} {direction}', fg=typer.colors.GREEN)

    _run(_move, verbose)


@app.command('sort-mode')
def sort_mode(
    mode: SortMode | None = typer.Argument(None, help='New sort mode (omit to show the current one)'),
    reset: bool = typer.Option(False, '--reset', help='Forget the stored mode and use the default (frequency)'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Show or change how projects are ordered."""
    if reset and mode is not None:
        raise typer.BadParameter('Pass either a sort mode or --reset, not both')

    async def _sort_mode(state: LauncherState) -> None:
        if reset:
            await state.catalog.clear_sort_mode()
            typer.secho(f'✓ Sort mode reset to {await state.catalog.ranking.get_sort_mode()}', fg=typer.colors.GREEN)
            return
        if mode is None:
            typer.echo(await state.catalog.ranking.get_sort_mode())
            return
        await state.catalog.set_sort_mode(mode)
        typer.secho(f'✓ Sort mode: {mode}', fg=typer.colors.GREEN)

    _run(_sort_mode, verbose)


@app.command('create')
def create_project(
    name: str = typer.Argument(..., help='New project folder name'),
    directory: Path | None = typer.Option(
        None, '--directory', '-d', help='Base directory (default: first configured base directory)'
    ),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Create a new project folder inside a base directory."""

    async def _create(state: LauncherState) -> None:
        target_dir = directory
        if target_dir is None:
            bases = await state.catalog.base_directories()
            if not bases:
                typer.secho('Error: No existing base directories configured.', fg=typer.colors.RED, err=True)
                typer.echo('Add one with: project-launcher paths add ~/Developer/*', err=True)
                raise typer.Exit(1)
            target_dir = Path(bases[0])

        project_path = await ProjectCreator().create_project(name, target_dir, state.logger)
        typer.secho('✓ Project created!', fg=typer.colors.GREEN)
        typer.echo(f'  {project_path}')

    _run(_create, verbose)


# ==============================================================================
# Path Commands
# ==============================================================================


@paths_app.command('list')
def list_paths(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """List configured path specs."""

    async def _list_paths(state: LauncherState) -> None:
        specs = await state.catalog.path_specs.get_stored_paths()
        if not specs:
            typer.secho('No paths configured.', fg=typer.colors.YELLOW)
            return

        for spec in specs:
            info = describe_path_spec(spec)
            typer.echo(f'{info.folder_name:<20} {info.spec}  ({info.label})', nl=info.exists)
            if not info.exists:
                typer.secho('  [not found]', fg=typer.colors.RED)

    _run(_list_paths, verbose)


@paths_app.command('add')
def add_path(
    spec: str = typer.Argument(..., help='Directory, or directory of projects ending in /*'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Add a path spec (e.g. ~/Developer/* or ~/Developer/my-app)."""

    async def _add(state: LauncherState) -> None:
        trimmed = spec.strip()
        if not trimmed:
            raise typer.BadParameter('Path must not be empty')

        await state.catalog.path_specs.add_stored_path(trimmed)
        if describe_path_spec(trimmed).exists:
            typer.secho(f'✓ Path added: {trimmed}', fg=typer.colors.GREEN)
        else:
            await state.logger.warning(f'Path added, but directory not found: {trimmed}')

    _run(_add, verbose)


@paths_app.command('remove')
def remove_path(
    spec: str = typer.Argument(..., help='Path spec exactly as listed'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Remove a configured path spec."""

    async def _remove(state: LauncherState) -> None:
        before = await state.catalog.path_specs.get_stored_paths()
        if spec not in before:
            typer.secho(f'Error: Path not configured: {spec}', fg=typer.colors.RED, err=True)
            raise typer.Exit(1)
        await state.catalog.path_specs.remove_stored_path(spec)
        typer.secho(f'✓ Path removed: {spec}', fg=typer.colors.GREEN)

    _run(_remove, verbose)


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
