"""Translate domain errors into HTTP responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ...core.errors import (
    DerivedAnswerLocked,
    IncompleteSubmission,
    InvalidMeasurement,
    SurveyError,
)

logger = logging.getLogger(__name__)


async def incomplete_submission_handler(request: Request, exc: IncompleteSubmission) -> JSONResponse:
    logger.info(
        "Rejected incomplete submission: %d question(s), %d contact field(s) missing",
        len(exc.missing_questions),
        len(exc.missing_contact),
    )
    return JSONResponse(
        status_code=422,
        content={
            "detail": str(exc),
            "missing_questions": list(exc.missing_questions),
            "missing_contact": list(exc.missing_contact),
        },
    )


async def invalid_measurement_handler(request: Request, exc: InvalidMeasurement) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc), "field": exc.field})


async def survey_error_handler(request: Request, exc: SurveyError) -> JSONResponse:
    status_code = 409 if isinstance(exc, DerivedAnswerLocked) else 422
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IncompleteSubmission, incomplete_submission_handler)
    app.add_exception_handler(InvalidMeasurement, invalid_measurement_handler)
    app.add_exception_handler(SurveyError, survey_error_handler)
