"""
Pydantic base models for project-launcher.

Two bases, chosen by where the data comes from:
- StrictModel: values built by this package (discovered projects, path spec
  descriptions, catalog views). Strict types, no extra fields, immutable.
- StoredModel: entries read back from the persisted store. The stored
  documents may have been written by older versions or edited by hand, so
  they are parsed leniently (3.0 is accepted as 3, unknown keys are dropped)
  instead of with StrictModel's settings. Still immutable.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Base for values constructed in code; rejects anything unexpected."""

    model_config = ConfigDict(
        extra='forbid',  # Raise error on unexpected fields
        strict=True,  # Strict type validation
        frozen=True,  # Immutable (cannot modify after creation)
    )


class StoredModel(BaseModel):
    """Base for persisted entries; coerces compatible values and drops unknown keys."""

    model_config = ConfigDict(
        extra='ignore',  # Unknown keys in stored entries are dropped on read
        strict=False,  # Accept integral floats and other lax conversions
        frozen=True,
    )
