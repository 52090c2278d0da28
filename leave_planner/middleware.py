from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.middleware.cors import CORSMiddleware

from leave_planner.api.deps import CALLER_HEADER

if TYPE_CHECKING:
    from fastapi import FastAPI

    from leave_planner.config import Settings


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure application middleware. CORS is only enabled outside production."""
    if settings.environment == "production":
        return
    app.add_middleware(
        CORSMiddleware,  # ty: ignore[invalid-argument-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["Content-Type", CALLER_HEADER],
    )
