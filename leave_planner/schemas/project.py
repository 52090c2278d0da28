# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator


class ProjectPayload(BaseModel):
    """Request body for creating or updating a project."""

    name: str = Field(min_length=1, max_length=200)
    customer_id: uuid.UUID
    start_date: date
    end_date: date | None = None

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "name must not be blank"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _validate_dates(self) -> Self:
        if self.end_date is not None and self.end_date < self.start_date:
            msg = "end_date must be empty or >= start_date"
            raise ValueError(msg)
        return self


class ProjectResponse(BaseModel):
    """Response schema for a single project."""

    id: uuid.UUID
    name: str
    customer_id: uuid.UUID
    customer_name: str | None = None
    start_date: date
    end_date: date | None


class ProjectListResponse(BaseModel):
    items: list[ProjectResponse]
    total: int
