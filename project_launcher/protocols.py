"""
Progress-reporting protocol for project-launcher services.

Services such as ProjectCatalog.load() and ProjectCreator.create_project()
report user-visible progress through an async logger passed in by the caller.
Internal diagnostics (unreadable store documents, unlistable directories) go
to the module-level `logging` loggers instead.
"""

from __future__ import annotations

from typing import Protocol


class LoggerProtocol(Protocol):
    """
    Async sink for progress messages shown to the person running a command.

    Implementations:
    - CLILogger (cli/logger.py): info only with --verbose, warnings and errors to stderr
    - NullLogger (below): discards everything; the default for library callers
    """

    async def info(self, message: str) -> None: ...
    async def warning(self, message: str) -> None: ...
    async def error(self, message: str) -> None: ...


class NullLogger:
    """Discards progress messages (used when a service is called without a logger)."""

    async def info(self, message: str) -> None:
        pass

    async def warning(self, message: str) -> None:
        pass

    async def error(self, message: str) -> None:
        pass
