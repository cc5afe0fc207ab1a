"""Health check endpoint."""
from __future__ import annotations

from fastapi import APIRouter

from ... import __version__
from ..core.config import settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
def healthcheck() -> dict[str, str]:
    return {
        "status": "ok",
        "version": __version__,
        "environment": settings.app_env,
    }
