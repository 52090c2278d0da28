from __future__ import annotations

from sqlmodel import Field

from leave_planner.models.base import TimestampMixin, UUIDBase


class Customer(UUIDBase, TimestampMixin, table=True):
    """Client organisation that owns projects."""

    __tablename__ = "customer"

    name: str = Field(max_length=200)
