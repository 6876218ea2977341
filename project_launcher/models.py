"""
Data models for project discovery and ranking.

Separation of concerns:
- models.py: Value types shared by services and front ends (this file)
- services/: Operations over the filesystem and the persisted store

Persisted documents use the camelCase field names of the stored format
(openCount, pinned, manualOrder, lastOpenedAt); Python code uses snake_case.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

import pydantic
from pydantic.alias_generators import to_camel

from project_launcher.base_model import StoredModel, StrictModel
from project_launcher.types import EpochMillis, PathSpec

__all__ = [
    'PATH_LABELS',
    'PathSpecInfo',
    'PathSpecKind',
    'Project',
    'ProjectMeta',
    'ProjectMetaMap',
    'ProjectMetaMapAdapter',
    'SortMode',
]


# ==============================================================================
# Discovery
# ==============================================================================


class Project(StrictModel):
    """A discovered project directory.

    `path` is the identity key used by the ranking store; `name` is only
    presentational (the directory's own name).
    """

    name: str
    path: str


PathSpecKind = Literal['parent', 'single']

PATH_LABELS: dict[PathSpecKind, str] = {
    'parent': 'Parent Folder',
    'single': 'Single Folder',
}


class PathSpecInfo(StrictModel):
    """Presentational description of one configured path spec."""

    spec: PathSpec
    folder_name: str
    kind: PathSpecKind
    exists: bool

    @property
    def label(self) -> str:
        return PATH_LABELS[self.kind]


# ==============================================================================
# Ranking
# ==============================================================================


class SortMode(StrEnum):
    """Ordering strategy applied to the project list (pinned always first)."""

    FREQUENCY = 'frequency'
    MANUAL = 'manual'
    ALPHABETICAL = 'alphabetical'
    RECENT = 'recent'


class ProjectMeta(StoredModel):
    """Usage metadata for one project path.

    A missing entry is equivalent to `ProjectMeta()`; readers construct that
    default on the fly and never persist it.

    Parsed leniently (see StoredModel): stored numbers may be integral floats
    such as 3.0, manual orders may be fractional, and unknown keys are dropped.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Allow both alias and field name
    )

    open_count: int = pydantic.Field(default=0, ge=0)
    pinned: bool = False
    manual_order: int | float | None = None  # int stays int when written back
    last_opened_at: EpochMillis | None = None  # Epoch milliseconds of the last open


ProjectMetaMap = dict[str, ProjectMeta]

ProjectMetaMapAdapter: pydantic.TypeAdapter[ProjectMetaMap] = pydantic.TypeAdapter(ProjectMetaMap)
