"""Shared pydantic base for commands and DTOs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base model that can be built from ORM entities."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
