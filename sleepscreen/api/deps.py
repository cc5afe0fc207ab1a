"""Common FastAPI dependencies."""
from __future__ import annotations

from .core.config import Settings, get_settings
from .services.survey_service import SurveyService, survey_service


def get_app_settings() -> Settings:
    return get_settings()


def get_survey_service() -> SurveyService:
    return survey_service
