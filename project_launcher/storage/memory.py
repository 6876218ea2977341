"""
In-memory storage backend.

Implements KeyValueStore for tests and for embedding the core in a host that
persists state by other means.
"""

from __future__ import annotations


class InMemoryStore:
    """Dict-backed key-value store (state lives for the process lifetime)."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Copy of all stored items (for inspection in tests)."""
        return dict(self._items)
