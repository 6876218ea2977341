"""
Local filesystem storage backend.

Implements KeyValueStore as a single JSON document (key -> serialized text)
on disk, e.g. ~/.project-launcher/store.json:

    {
      "projectPaths": "[\"~/Developer/*\"]",
      "projectMeta": "{\"/Users/me/Developer/app\": {\"openCount\": 3, \"pinned\": false}}",
      "sortMode": "frequency"
    }

Writes take a file lock, re-read the document, modify one key and replace the
file atomically (temp file + rename).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from filelock import FileLock

__all__ = ['JsonFileStore']

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Key-value store backed by one JSON file."""

    def __init__(self, store_file: Path) -> None:
        """
        Initialize JSON file storage.

        The file and its parent directory are created lazily on first write.

        Args:
            store_file: Path of the JSON document
        """
        self.store_file = store_file
        self.lock_file = store_file.with_suffix('.lock')

    async def get_item(self, key: str) -> str | None:
        """
        Read one key from the document.

        Returns:
            Stored text, or None if the key, the file, or a readable document is missing
        """
        value = self._read_document().get(key)
        return value if isinstance(value, str) else None

    async def set_item(self, key: str, value: str) -> None:
        """
        Store value under key.

        Raises:
            OSError: If the document cannot be written
        """
        self.store_file.parent.mkdir(parents=True, exist_ok=True)

        # Acquire lock, read, modify, write atomically
        with FileLock(self.lock_file):
            document = self._read_document()
            document[key] = value
            self._write_document(document)

    async def remove_item(self, key: str) -> None:
        """Remove key from the document if present."""
        if not self.store_file.exists():
            return

        with FileLock(self.lock_file):
            document = self._read_document()
            if key in document:
                del document[key]
                self._write_document(document)

    def _read_document(self) -> dict[str, object]:
        """Read and parse the store file (empty if missing or unreadable)."""
        if not self.store_file.exists():
            return {}

        try:
            with self.store_file.open(encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning('Ignoring unreadable store file %s: %s', self.store_file, e)
            return {}

        if not isinstance(data, dict):
            logger.warning('Ignoring store file %s: top level is not an object', self.store_file)
            return {}
        return data

    def _write_document(self, document: dict[str, object]) -> None:
        """Write the store file atomically using temp file + rename."""
        tmp_file = self.store_file.with_suffix('.tmp.json')

        with tmp_file.open('w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)

        # Atomic rename
        tmp_file.replace(self.store_file)
