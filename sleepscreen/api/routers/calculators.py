"""Endpoints for the BMI, neck size and age calculators."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_survey_service
from ..schemas.calculators import (
    AgeRequest,
    AgeResponse,
    BMIRequest,
    BMIResponse,
    NeckRequest,
    NeckResponse,
)
from ..services.survey_service import SurveyService

router = APIRouter(prefix="/api/calculators", tags=["calculators"])


@router.post("/bmi", response_model=BMIResponse)
def calculate_bmi(payload: BMIRequest, service: SurveyService = Depends(get_survey_service)) -> BMIResponse:
    return service.bmi(payload)


@router.post("/neck", response_model=NeckResponse)
def calculate_neck(payload: NeckRequest, service: SurveyService = Depends(get_survey_service)) -> NeckResponse:
    return service.neck(payload)


@router.post("/age", response_model=AgeResponse)
def calculate_age(payload: AgeRequest, service: SurveyService = Depends(get_survey_service)) -> AgeResponse:
    return service.age(payload.age)
