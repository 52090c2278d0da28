# ruff: noqa: TC003
from __future__ import annotations

import uuid

from pydantic import BaseModel, Field, field_validator


class CustomerPayload(BaseModel):
    name: str = Field(min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "name must not be blank"
            raise ValueError(msg)
        return value


class CustomerResponse(BaseModel):
    id: uuid.UUID
    name: str


class CustomerListResponse(BaseModel):
    items: list[CustomerResponse]
    total: int
