"""
Key-value store protocol for persisted launcher state.

Defines the interface for storage backends (JSON file, in-memory).
Values are opaque serialized text; callers own the (de)serialization.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for string-keyed, string-valued persisted storage."""

    async def get_item(self, key: str) -> str | None:
        """
        Read the value stored under key.

        Args:
            key: Storage key

        Returns:
            Stored text, or None if the key is unset or the store is unreadable
        """
        ...

    async def set_item(self, key: str, value: str) -> None:
        """
        Store value under key, replacing any previous value.

        Args:
            key: Storage key
            value: Serialized value

        Raises:
            OSError: If the backend cannot persist the value
        """
        ...

    async def remove_item(self, key: str) -> None:
        """
        Remove key if present (no error when absent).

        Args:
            key: Storage key
        """
        ...
