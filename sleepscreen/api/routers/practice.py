"""Practice branding and navigation shown above the survey."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..core.config import Settings
from ..deps import get_app_settings, get_survey_service
from ..schemas.practice import PracticeInfo
from ..services.survey_service import SurveyService

router = APIRouter(prefix="/api/practice", tags=["practice"])


@router.get("", response_model=PracticeInfo)
def practice_info(
    settings: Settings = Depends(get_app_settings),
    service: SurveyService = Depends(get_survey_service),
) -> PracticeInfo:
    return service.practice(settings)
