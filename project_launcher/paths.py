"""
Path spec utilities for project discovery.

A path spec is a user-configured string naming either a single project
directory or a directory whose immediate subdirectories are projects:

- `~/Developer/my-app` -> one project
- `~/Developer/*`      -> every visible subdirectory of ~/Developer

A leading `~` is expanded to the user's home directory. Specs are otherwise
kept verbatim, since the stored spec string is its own identity.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from project_launcher.types import PathSpec

__all__ = [
    'WILDCARD_SUFFIX',
    'expand_home',
    'is_directory',
    'is_wildcard',
    'normalize_specs',
    'strip_wildcard',
]

WILDCARD_SUFFIX = '/*'


def normalize_specs(specs: Iterable[PathSpec]) -> Iterator[PathSpec]:
    """Yield trimmed specs, skipping blank ones."""
    for spec in specs:
        trimmed = spec.strip()
        if trimmed:
            yield trimmed


def expand_home(spec: PathSpec, home: Path | None = None) -> str:
    """
    Expand a leading `~` to the home directory.

    Args:
        spec: Path spec, possibly home-relative
        home: Home directory override (defaults to Path.home())

    Returns:
        Spec with `~` replaced by the home directory, otherwise unchanged

    Examples:
        >>> expand_home('~', Path('/home/u'))
        '/home/u'

        >>> expand_home('~/Dev/*', Path('/home/u'))
        '/home/u/Dev/*'

        >>> expand_home('/opt/src', Path('/home/u'))
        '/opt/src'
    """
    if not spec.startswith('~'):
        return spec

    home_dir = str(home if home is not None else Path.home())
    rest = spec[1:].lstrip('/')
    if not rest:
        return home_dir
    return os.path.join(home_dir, rest)


def is_wildcard(spec: PathSpec) -> bool:
    """True if spec means "each subdirectory is a project"."""
    return spec.endswith(WILDCARD_SUFFIX)


def strip_wildcard(spec: PathSpec) -> str:
    """Return the literal directory a spec refers to."""
    return spec[: -len(WILDCARD_SUFFIX)] if is_wildcard(spec) else spec


def is_directory(path: str) -> bool:
    """True if path exists and is a directory. Never raises."""
    # os.path.isdir swallows OSError/ValueError and rejects ''
    return bool(path) and os.path.isdir(path)
