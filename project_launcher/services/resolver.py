"""
Project discovery service - expands configured path specs into projects.

Resolution is a pure function of (path specs, filesystem state): nothing is
cached, and every call reads the directories live.

Robustness policy:
- A spec whose directory is missing, not a directory, or unreadable
  contributes nothing
- Filesystem errors are logged at debug level and never raised, so one bad
  spec cannot abort discovery of the rest
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from project_launcher.collation import collation_key
from project_launcher.models import Project
from project_launcher.paths import expand_home, is_directory, is_wildcard, normalize_specs, strip_wildcard
from project_launcher.types import PathSpec

__all__ = ['PathResolver']

logger = logging.getLogger(__name__)


class PathResolver:
    """
    Service for turning configured path specs into concrete projects.

    Wildcard specs (`dir/*`) expand to each visible subdirectory of `dir`;
    other specs denote a single project directory.
    """

    def __init__(self, home: Path | None = None) -> None:
        """Initialize resolver (home defaults to Path.home() at expansion time)."""
        self.home = home

    def resolve_projects(self, specs: Iterable[PathSpec]) -> list[Project]:
        """
        Resolve specs into a deduplicated, name-sorted project list.

        Traversal order is spec order, then listing order within a wildcard
        spec; the first project seen for a path wins. The result is sorted by
        case- and accent-insensitive name (stable, so equal names keep
        traversal order).

        Args:
            specs: Configured path specs in user order

        Returns:
            Projects sorted by collated name
        """
        projects: list[Project] = []
        seen: set[str] = set()

        for spec in normalize_specs(specs):
            expanded = expand_home(spec, self.home)
            if is_wildcard(expanded):
                candidates = self._list_subprojects(strip_wildcard(expanded))
            else:
                candidates = self._single_project(expanded)

            for project in candidates:
                if project.path not in seen:
                    seen.add(project.path)
                    projects.append(project)

        return sorted(projects, key=lambda p: collation_key(p.name))

    def resolve_base_directories(self, specs: Iterable[PathSpec]) -> list[str]:
        """
        Resolve the literal directories the specs refer to.

        Used to offer target directories when creating a project. Order
        follows the configured specs (no sorting); duplicates are dropped by
        exact string equality.

        Args:
            specs: Configured path specs in user order

        Returns:
            Existing base directories in first-seen order
        """
        directories: list[str] = []

        for spec in normalize_specs(specs):
            directory = strip_wildcard(expand_home(spec, self.home))
            if directory not in directories and is_directory(directory):
                directories.append(directory)

        return directories

    def _single_project(self, path: str) -> list[Project]:
        """Project for a literal spec, or nothing if it is not a directory."""
        if not is_directory(path):
            logger.debug('Skipping %s: not an existing directory', path)
            return []

        name = os.path.basename(path.rstrip('/')) or path
        return [Project(name=name, path=path)]

    def _list_subprojects(self, directory: str) -> list[Project]:
        """Projects for each visible subdirectory, or nothing on any error."""
        if not is_directory(directory):
            logger.debug('Skipping %s/*: not an existing directory', directory)
            return []

        try:
            with os.scandir(directory) as it:
                # Symlinks are not followed, matching a plain directory listing
                names = sorted(
                    entry.name for entry in it if entry.is_dir(follow_symlinks=False) and not entry.name.startswith('.')
                )
        except OSError as e:
            logger.debug('Skipping %s/*: listing failed: %s', directory, e)
            return []

        return [Project(name=name, path=os.path.join(directory, name)) for name in names]
