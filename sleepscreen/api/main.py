"""FastAPI application bootstrap."""
from __future__ import annotations

from fastapi import FastAPI

from .. import __version__
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging import register_middleware, setup_logging
from .core.security import enable_cors
from .routers import calculators, health, practice, survey

setup_logging(settings.log_level)

app = FastAPI(title="Sleep Apnea Screening API", version=__version__)

register_middleware(app)
enable_cors(app)
register_exception_handlers(app)

app.include_router(health.router)
app.include_router(practice.router)
app.include_router(survey.router)
app.include_router(calculators.router)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "Sleep Apnea Screening API", "health": "/health"}
