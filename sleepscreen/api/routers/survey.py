"""API endpoints for the STOP-BANG survey."""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_survey_service
from ..schemas.calculators import FieldValidationResponse, FieldValue
from ..schemas.survey import QuestionItem, SurveyResultResponse, SurveySubmission
from ..services.survey_service import SurveyService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["survey"])


@router.get("/survey/questions", response_model=List[QuestionItem])
def list_questions(service: SurveyService = Depends(get_survey_service)) -> List[QuestionItem]:
    return service.questions()


@router.post("/survey/submit", response_model=SurveyResultResponse)
def submit_survey(
    payload: SurveySubmission,
    service: SurveyService = Depends(get_survey_service),
) -> SurveyResultResponse:
    result = service.submit(payload)
    logger.info(
        "Assessment %s scored %s/%s (%s)",
        result.assessment_id,
        result.score,
        result.max_score,
        result.risk_tier.value,
    )
    return result


@router.post("/validate/{field}", response_model=FieldValidationResponse)
def validate_field(
    field: str,
    payload: FieldValue,
    service: SurveyService = Depends(get_survey_service),
) -> FieldValidationResponse:
    try:
        return service.validate(field, payload.value)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown field: {field}") from exc
