"""
Ranking service - per-project usage metadata, sort mode, and ordering.

Persisted state (two keys in the KeyValueStore):
- projectMeta: one JSON document mapping project path -> ProjectMeta
- sortMode: bare SortMode string

Every mutator reads the whole metadata document, modifies it, and writes it
back (last write wins). Nothing is cached between calls; callers re-read
after each mutation to observe the latest state.

Missing entries read as ProjectMeta() without being persisted. Entries for
projects that no longer exist are never deleted, they simply go unused.
Entries are validated one at a time: an entry that cannot be parsed reads as
the default and is written back untouched by the next mutation.
"""

from __future__ import annotations

import functools
import json
import logging
import math
import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

import pydantic

from project_launcher.collation import compare_names
from project_launcher.models import Project, ProjectMeta, ProjectMetaMap, ProjectMetaMapAdapter, SortMode
from project_launcher.storage.protocol import KeyValueStore
from project_launcher.types import MoveDirection

__all__ = [
    'DEFAULT_SORT_MODE',
    'RankingStore',
    'compare_projects',
    'sort_projects',
]

logger = logging.getLogger(__name__)

DEFAULT_SORT_MODE = SortMode.FREQUENCY


def _now_millis() -> int:
    return int(time.time() * 1000)


# ==============================================================================
# Comparator
# ==============================================================================


def compare_projects(a: Project, b: Project, meta_a: ProjectMeta, meta_b: ProjectMeta, mode: SortMode) -> int:
    """
    Three-way comparison of two projects for display.

    Pinned projects precede unpinned ones in every mode. Within the same pin
    state:
    - manual: ascending manual_order (unset sorts last)
    - alphabetical: name only
    - recent: descending last_opened_at (unset counts as 0)
    - frequency: descending open_count
    Remaining ties are broken by case- and accent-insensitive name.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if equal
    """
    if meta_a.pinned != meta_b.pinned:
        return -1 if meta_a.pinned else 1

    match mode:
        case SortMode.MANUAL:
            order_a = meta_a.manual_order if meta_a.manual_order is not None else math.inf
            order_b = meta_b.manual_order if meta_b.manual_order is not None else math.inf
            if order_a != order_b:
                return -1 if order_a < order_b else 1
        case SortMode.ALPHABETICAL:
            pass
        case SortMode.RECENT:
            opened_a = meta_a.last_opened_at or 0
            opened_b = meta_b.last_opened_at or 0
            if opened_a != opened_b:
                return -1 if opened_a > opened_b else 1
        case _:
            if meta_a.open_count != meta_b.open_count:
                return -1 if meta_a.open_count > meta_b.open_count else 1

    return compare_names(a.name, b.name)


def sort_projects(projects: Iterable[Project], metadata: Mapping[str, ProjectMeta], mode: SortMode) -> list[Project]:
    """
    Order projects for display (stable).

    Args:
        projects: Projects to order
        metadata: Metadata keyed by project path (missing entries use defaults)
        mode: Active sort mode

    Returns:
        New list in display order
    """
    default = ProjectMeta()

    def _compare(a: Project, b: Project) -> int:
        return compare_projects(a, b, metadata.get(a.path, default), metadata.get(b.path, default), mode)

    return sorted(projects, key=functools.cmp_to_key(_compare))


# ==============================================================================
# Store
# ==============================================================================


class RankingStore:
    """
    Service for reading and updating project usage metadata and the sort mode.

    Assumes a single active caller: read-modify-write sequences are not
    guarded against concurrent writers beyond what the backend provides.
    """

    META_KEY = 'projectMeta'
    SORT_MODE_KEY = 'sortMode'

    def __init__(self, store: KeyValueStore, clock: Callable[[], int] = _now_millis) -> None:
        """
        Initialize ranking store.

        Args:
            store: Persisted key-value backend
            clock: Source of "now" in epoch milliseconds (for last_opened_at)
        """
        self.store = store
        self.clock = clock

    async def get_meta(self, path: str) -> ProjectMeta:
        """Stored metadata for path, or the default (never persisted by reading)."""
        meta = await self._read_all()
        if path in meta:
            return meta[path]
        return ProjectMeta()

    async def get_all_meta(self) -> ProjectMetaMap:
        """Snapshot of all stored metadata keyed by project path."""
        return await self._read_all()

    async def increment_open_count(self, path: str) -> None:
        """Record an open: open_count + 1 and last_opened_at = now, other fields kept."""
        meta, unreadable = await self._read_document()
        current = meta.get(path, ProjectMeta())
        meta[path] = current.model_copy(
            update={'open_count': current.open_count + 1, 'last_opened_at': self.clock()},
        )
        await self._write_all(meta, unreadable)

    async def toggle_pin(self, path: str) -> bool:
        """
        Flip the pinned flag for path.

        Returns:
            The new pinned state
        """
        meta, unreadable = await self._read_document()
        current = meta.get(path, ProjectMeta())
        pinned = not current.pinned
        meta[path] = current.model_copy(update={'pinned': pinned})
        await self._write_all(meta, unreadable)
        return pinned

    async def reset_ranking(self, path: str) -> None:
        """Zero the open count of an existing entry; no-op (nothing created) when absent."""
        meta, unreadable = await self._read_document()
        if path not in meta:
            return

        meta[path] = meta[path].model_copy(update={'open_count': 0})
        await self._write_all(meta, unreadable)

    async def get_sort_mode(self) -> SortMode:
        """Persisted sort mode, or frequency when unset or unrecognized."""
        value = await self.store.get_item(self.SORT_MODE_KEY)
        if value is None:
            return DEFAULT_SORT_MODE

        try:
            return SortMode(value)
        except ValueError:
            logger.warning('Ignoring unknown sort mode %r, using %s', value, DEFAULT_SORT_MODE)
            return DEFAULT_SORT_MODE

    async def set_sort_mode(self, mode: SortMode) -> None:
        """Persist the sort mode (any mode may follow any other)."""
        await self.store.set_item(self.SORT_MODE_KEY, SortMode(mode).value)

    async def clear_sort_mode(self) -> None:
        """Remove the persisted sort mode so get_sort_mode() falls back to the default."""
        await self.store.remove_item(self.SORT_MODE_KEY)

    async def move_project(self, path: str, direction: MoveDirection, displayed_order: Sequence[str]) -> None:
        """
        Swap path's manual order with its neighbour in the displayed order.

        Precondition: displayed_order is the full, currently displayed list of
        project paths (pinned first, then the active mode). The swap is
        computed against that list as given; a stale or differently sorted
        list still swaps mechanically but may not move the project visually.

        Unset manual_order values default to the project's index in
        displayed_order (the mover's own index, the neighbour's own index), so
        a later sort by manual order shows the two swapped. Meaningful in
        manual mode; in other modes the values take effect once the mode is
        switched.

        No-op if path is not in displayed_order or the neighbour would be out
        of bounds (up on the first, down on the last).

        Raises:
            ValueError: If direction is not 'up' or 'down'
        """
        if direction not in ('up', 'down'):
            raise ValueError(f"Direction must be 'up' or 'down', got {direction!r}")

        if path not in displayed_order:
            return

        index = displayed_order.index(path)
        swap_index = index - 1 if direction == 'up' else index + 1
        if not 0 <= swap_index < len(displayed_order):
            return

        neighbour = displayed_order[swap_index]
        meta, unreadable = await self._read_document()
        current = meta.get(path, ProjectMeta())
        other = meta.get(neighbour, ProjectMeta())

        current_order = current.manual_order if current.manual_order is not None else index
        other_order = other.manual_order if other.manual_order is not None else swap_index

        meta[path] = current.model_copy(update={'manual_order': other_order})
        meta[neighbour] = other.model_copy(update={'manual_order': current_order})
        await self._write_all(meta, unreadable)

    async def _read_all(self) -> ProjectMetaMap:
        meta, _ = await self._read_document()
        return meta

    async def _read_document(self) -> tuple[ProjectMetaMap, dict[str, Any]]:
        """
        Read the metadata document, validating each entry on its own.

        An entry that fails validation is left out of the parsed map and
        returned raw in the second element, so a later write can store it back
        unchanged. One bad entry never hides the others.

        Returns:
            (parsed entries by path, raw unreadable entries by path). Both are
            empty if the document is missing, not JSON, or not a JSON object.
        """
        raw = await self.store.get_item(self.META_KEY)
        if raw is None:
            return {}, {}

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning('Ignoring malformed %s document: %s', self.META_KEY, e)
            return {}, {}

        if not isinstance(document, dict):
            logger.warning(
                'Ignoring %s document: expected a JSON object, got %s', self.META_KEY, type(document).__name__
            )
            return {}, {}

        meta: ProjectMetaMap = {}
        unreadable: dict[str, Any] = {}
        for path, entry in document.items():
            try:
                meta[path] = ProjectMeta.model_validate(entry)
            except pydantic.ValidationError as e:
                logger.warning('Ignoring unreadable %s entry for %s: %s', self.META_KEY, path, e)
                unreadable[path] = entry
        return meta, unreadable

    async def _write_all(self, meta: ProjectMetaMap, unreadable: Mapping[str, Any]) -> None:
        """Serialize and store the whole metadata document, keeping unreadable entries as found."""
        document = {
            **unreadable,
            **ProjectMetaMapAdapter.dump_python(meta, mode='json', by_alias=True, exclude_none=True),
        }
        await self.store.set_item(self.META_KEY, json.dumps(document, ensure_ascii=False))
