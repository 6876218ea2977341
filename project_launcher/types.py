"""
Shared type definitions for the project-launcher package.

Centralizes common type annotations used across multiple modules.
"""

from typing import Annotated, Literal

import pydantic

# Configured path pattern as entered by the user (e.g. "~/Developer/*")
PathSpec = str

# Milliseconds since the Unix epoch (matches the persisted lastOpenedAt format)
EpochMillis = Annotated[int, pydantic.Field(ge=0)]

# Direction for manual reordering
MoveDirection = Literal['up', 'down']
