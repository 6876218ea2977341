"""
Project creation service - makes a new project folder in a base directory.

Reports failure conditions as typed exceptions (see exceptions.py); message
formatting for users is left to the front end.
"""

from __future__ import annotations

from pathlib import Path

from project_launcher.exceptions import InvalidProjectNameError, ProjectAlreadyExistsError, ProjectCreationError
from project_launcher.protocols import LoggerProtocol, NullLogger

__all__ = ['ProjectCreator']


class ProjectCreator:
    """Service for creating new project folders."""

    async def create_project(self, name: str, directory: Path, logger: LoggerProtocol | None = None) -> Path:
        """
        Create directory/name.

        Args:
            name: Project folder name (surrounding whitespace is ignored)
            directory: Base directory, typically one from resolve_base_directories()
            logger: Optional progress logger

        Returns:
            Path of the created folder

        Raises:
            InvalidProjectNameError: If name is blank
            ProjectAlreadyExistsError: If the folder already exists
            ProjectCreationError: If the folder cannot be created
        """
        logger = logger or NullLogger()

        trimmed = name.strip()
        if not trimmed:
            raise InvalidProjectNameError(name)

        project_path = directory / trimmed
        if project_path.exists():
            raise ProjectAlreadyExistsError(project_path)

        try:
            project_path.mkdir(parents=True)
        except FileExistsError as e:
            raise ProjectAlreadyExistsError(project_path) from e
        except OSError as e:
            raise ProjectCreationError(f'Failed to create project {project_path}: {e}') from e

        await logger.info(f'Created project folder: {project_path}')
        return project_path
