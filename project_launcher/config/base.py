"""
Base configuration for project-launcher front ends.

Shared settings and helper functions for all front end types (CLI, embedding hosts).
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

T = TypeVar('T', bound='BaseLauncherSettings')


class BaseLauncherSettings(pydantic_settings.BaseSettings):
    """Shared configuration across all front ends.

    Environment variables use the PROJECT_LAUNCHER_ prefix, e.g.
    PROJECT_LAUNCHER_DATA_DIR=/tmp/launcher.
    """

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix='PROJECT_LAUNCHER_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='ignore',  # .env may hold variables for other tools
    )

    # Application metadata
    APP_NAME: str = 'project-launcher'
    VERSION: str = '0.1.0'

    # Persisted state location
    DATA_DIR: pathlib.Path = pathlib.Path.home() / '.project-launcher'
    STORE_FILENAME: str = 'store.json'

    @pydantic.field_validator('STORE_FILENAME')
    @classmethod
    def validate_store_filename(cls, v: str) -> str:
        """Validate the store filename is a bare .json filename."""
        if not v.endswith('.json') or '/' in v:
            raise ValueError('STORE_FILENAME must be a bare filename ending in .json')
        return v

    @property
    def store_file(self) -> pathlib.Path:
        return self.DATA_DIR.expanduser() / self.STORE_FILENAME


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset (production), loads from environment variables only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class(_env_file=None)  # No .env file, load from environment only

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
