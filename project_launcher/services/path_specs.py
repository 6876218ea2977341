"""
Path spec service - the user's configured list of project roots.

Persisted as a JSON array of strings under the projectPaths key. Specs are
stored exactly as entered (after trimming), including any `/*` suffix.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from project_launcher.models import PathSpecInfo
from project_launcher.paths import expand_home, is_directory, is_wildcard, strip_wildcard
from project_launcher.storage.protocol import KeyValueStore
from project_launcher.types import PathSpec

__all__ = ['PathSpecStore', 'describe_path_spec']

logger = logging.getLogger(__name__)


def describe_path_spec(spec: PathSpec, home: Path | None = None) -> PathSpecInfo:
    """
    Describe a configured spec for display.

    Args:
        spec: Path spec as stored
        home: Home directory override for `~` expansion

    Returns:
        PathSpecInfo with folder name, kind (parent/single) and existence

    Examples:
        >>> describe_path_spec('/nonexistent/Developer/*').folder_name
        'Developer'
    """
    literal = strip_wildcard(spec)
    folder_name = literal.rstrip('/').rsplit('/', 1)[-1] or literal
    return PathSpecInfo(
        spec=spec,
        folder_name=folder_name,
        kind='parent' if is_wildcard(spec) else 'single',
        exists=is_directory(expand_home(literal, home)),
    )


class PathSpecStore:
    """Service for reading and editing the configured path specs."""

    PATHS_KEY = 'projectPaths'

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    async def get_stored_paths(self) -> list[PathSpec]:
        """Configured specs in user order (empty when unset or malformed)."""
        raw = await self.store.get_item(self.PATHS_KEY)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning('Ignoring malformed %s document: %s', self.PATHS_KEY, e)
            return []

        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            logger.warning('Ignoring %s document: expected a list of strings', self.PATHS_KEY)
            return []
        return data

    async def add_stored_path(self, spec: PathSpec) -> list[PathSpec]:
        """
        Append spec unless it is blank or already stored.

        Returns:
            The stored specs after the change
        """
        trimmed = spec.strip()
        paths = await self.get_stored_paths()
        if trimmed and trimmed not in paths:
            paths.append(trimmed)
            await self._write(paths)
        return paths

    async def remove_stored_path(self, spec: PathSpec) -> list[PathSpec]:
        """
        Remove every exact occurrence of spec.

        Returns:
            The stored specs after the change
        """
        paths = [p for p in await self.get_stored_paths() if p != spec]
        await self._write(paths)
        return paths

    async def _write(self, paths: list[PathSpec]) -> None:
        await self.store.set_item(self.PATHS_KEY, json.dumps(paths, ensure_ascii=False))
