"""Storage backends for persisted launcher state."""

from project_launcher.storage.local import JsonFileStore
from project_launcher.storage.memory import InMemoryStore
from project_launcher.storage.protocol import KeyValueStore

__all__ = ['InMemoryStore', 'JsonFileStore', 'KeyValueStore']
