"""
Project catalog - the display list a front end renders.

Combines the three core pieces for one load:
    PathSpecStore (configured specs)
      -> PathResolver (projects on disk)
      -> RankingStore (metadata + sort mode)
      -> sort_projects (display order)

The resolver runs fresh on every load; no result is kept between calls.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field

from project_launcher.base_model import StrictModel
from project_launcher.collation import collation_key
from project_launcher.exceptions import AmbiguousProjectError, ProjectNotFoundError
from project_launcher.models import Project, ProjectMetaMap, SortMode
from project_launcher.paths import expand_home
from project_launcher.protocols import LoggerProtocol, NullLogger
from project_launcher.services.path_specs import PathSpecStore
from project_launcher.services.ranking import RankingStore, sort_projects
from project_launcher.services.resolver import PathResolver
from project_launcher.storage.protocol import KeyValueStore
from project_launcher.types import MoveDirection

__all__ = ['CatalogView', 'ProjectCatalog']


class CatalogView(StrictModel):
    """One load of the catalog: projects in display order plus the state used to order them."""

    projects: list[Project]
    metadata: ProjectMetaMap = Field(default_factory=dict)
    sort_mode: SortMode

    @property
    def displayed_order(self) -> list[str]:
        return [project.path for project in self.projects]

    def find(self, reference: str, home: Path | None = None) -> Project:
        """
        Find a displayed project by path or by name.

        Paths are matched exactly, after `~` expansion, and after making them
        absolute. Names are matched case- and accent-insensitively.

        Args:
            reference: Project path or name
            home: Home directory override for `~` expansion

        Returns:
            The matching project

        Raises:
            ProjectNotFoundError: If nothing matches
            AmbiguousProjectError: If the name matches several projects
        """
        expanded = expand_home(reference, home)
        candidate_paths = {reference, expanded, os.path.abspath(expanded)}
        for project in self.projects:
            if project.path in candidate_paths:
                return project

        key = collation_key(reference)
        matches = [project for project in self.projects if collation_key(project.name) == key]
        if len(matches) == 1:
            return matches[0]
        if not matches:
            raise ProjectNotFoundError(reference)
        raise AmbiguousProjectError(reference, [project.path for project in matches])


class ProjectCatalog:
    """
    Facade over path specs, discovery and ranking for a single front end session.

    All state lives in the KeyValueStore; every call re-reads it.
    """

    def __init__(self, store: KeyValueStore, home: Path | None = None) -> None:
        self.path_specs = PathSpecStore(store)
        self.resolver = PathResolver(home)
        self.ranking = RankingStore(store)

    async def load(self, logger: LoggerProtocol | None = None) -> CatalogView:
        """
        Resolve configured specs and order the projects for display.

        Returns:
            CatalogView with projects pinned-first, then by the active sort mode
        """
        logger = logger or NullLogger()

        specs = await self.path_specs.get_stored_paths()
        await logger.info(f'Resolving {len(specs)} configured path(s)')

        projects = self.resolver.resolve_projects(specs)
        metadata = await self.ranking.get_all_meta()
        sort_mode = await self.ranking.get_sort_mode()
        await logger.info(f'Found {len(projects)} project(s), sorting by {sort_mode}')

        return CatalogView(
            projects=sort_projects(projects, metadata, sort_mode),
            metadata=metadata,
            sort_mode=sort_mode,
        )

    async def base_directories(self) -> list[str]:
        """Existing base directories of the configured specs, in configured order."""
        return self.resolver.resolve_base_directories(await self.path_specs.get_stored_paths())

    async def record_open(self, path: str) -> None:
        await self.ranking.increment_open_count(path)

    async def toggle_pin(self, path: str) -> bool:
        return await self.ranking.toggle_pin(path)

    async def reset_ranking(self, path: str) -> None:
        await self.ranking.reset_ranking(path)

    async def set_sort_mode(self, mode: SortMode) -> None:
        await self.ranking.set_sort_mode(mode)

    async def clear_sort_mode(self) -> None:
        await self.ranking.clear_sort_mode()

    async def move(self, path: str, direction: MoveDirection) -> None:
        """Move path one step in the current display order (see RankingStore.move_project)."""
        view = await self.load()
        await self.ranking.move_project(path, direction, view.displayed_order)
