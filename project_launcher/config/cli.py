"""
CLI configuration.

Extends base configuration with command-line specific settings.
"""

from __future__ import annotations

from project_launcher.config.base import BaseLauncherSettings, lazy_settings


class CliSettings(BaseLauncherSettings):
    """CLI-specific configuration."""

    VERBOSE: bool = False  # Default for --verbose


# Module-level singleton (lazy-loaded)
settings = lazy_settings(CliSettings)
