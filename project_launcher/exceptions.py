"""
Shared exceptions for project-launcher.

Domain-specific exceptions used across services. Messages describe the
condition only; front ends decide how to present them.

Exception Hierarchy:
    ProjectLauncherError (base)
    ├── ProjectResolutionError (project lookup failures)
    │   ├── ProjectNotFoundError (reference matches no discovered project)
    │   └── AmbiguousProjectError (name matches multiple projects)
    └── ProjectCreationError (new project folder could not be created)
        ├── InvalidProjectNameError (blank project name)
        └── ProjectAlreadyExistsError (target folder already exists)
"""

from __future__ import annotations

from pathlib import Path


class ProjectLauncherError(Exception):
    """Base exception for all project-launcher errors."""


class ProjectResolutionError(ProjectLauncherError):
    """Base exception for project lookup failures."""


class ProjectNotFoundError(ProjectResolutionError):
    """Raised when a reference matches no discovered project."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f'No discovered project matches: {reference}')


class AmbiguousProjectError(ProjectResolutionError):
    """Raised when a project name matches multiple discovered projects."""

    def __init__(self, reference: str, matches: list[str]) -> None:
        self.reference = reference
        self.matches = matches
        matches_str = '\n  '.join(matches[:10])
        if len(matches) > 10:
            matches_str += f'\n  ... and {len(matches) - 10} more'
        super().__init__(
            f"Project name '{reference}' is ambiguous. Matches {len(matches)} projects:\n  {matches_str}\n\n"
            f'Please provide the project path instead.'
        )


class ProjectCreationError(ProjectLauncherError):
    """Raised when a new project folder cannot be created."""


class InvalidProjectNameError(ProjectCreationError):
    """Raised when a project name is empty after trimming."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__('Project name is required')


class ProjectAlreadyExistsError(ProjectCreationError):
    """Raised when the target project folder already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Folder already exists: {path}')
