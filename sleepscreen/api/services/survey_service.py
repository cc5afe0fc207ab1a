"""Stateless orchestration of survey scoring, calculators and validators."""
from __future__ import annotations

import logging
from typing import List

from ...content import load_pack
from ...core import calculators, validators
from ...core.answers import DERIVED_QUESTIONS, Question
from ...core.scoring import SurveyResult
from ...core.session import SurveySession
from ..core.config import Settings
from ..schemas.calculators import (
    AgeResponse,
    BMIRequest,
    BMIResponse,
    FieldValidationResponse,
    NeckRequest,
    NeckResponse,
)
from ..schemas.practice import BreadcrumbItem, PracticeInfo
from ..schemas.survey import QuestionItem, SurveyResultResponse, SurveySubmission, TierGuidance

logger = logging.getLogger(__name__)


def to_response(result: SurveyResult) -> SurveyResultResponse:
    guidance = result.risk_tier.guidance
    return SurveyResultResponse(
        assessment_id=result.assessment_id,
        score=result.score,
        max_score=result.max_score,
        risk_tier=result.risk_tier,
        respondent_name=result.respondent_name,
        greeting=result.greeting,
        guidance=TierGuidance(**guidance) if guidance else None,
        email_report_requested=result.email_report_requested,
        additional_risk_factors=list(result.additional_risk_factors),
    )


class SurveyService:
    """Score submissions without keeping any survey state between calls."""

    def __init__(self, pack_id: str = "stop_bang") -> None:
        self.pack_id = pack_id

    def questions(self) -> List[QuestionItem]:
        content = load_pack(self.pack_id)["questions"]
        return [
            QuestionItem(
                id=question,
                title=content[question.value]["title"],
                description=content[question.value]["description"],
                derived=question in DERIVED_QUESTIONS,
            )
            for question in Question
        ]

    def submit(self, submission: SurveySubmission) -> SurveyResultResponse:
        session = SurveySession.from_submission(submission.model_dump(mode="json"))
        result = session.submit()
        return to_response(result)

    def bmi(self, request: BMIRequest) -> BMIResponse:
        evaluated = calculators.evaluate_body_metrics(
            request.height, request.height_unit, request.weight, request.weight_unit
        )
        return BMIResponse(bmi=evaluated.bmi, bmi_over_35=evaluated.over_35)

    def neck(self, request: NeckRequest) -> NeckResponse:
        inches = calculators.neck_in_inches(request.neck_size, request.neck_unit)
        return NeckResponse(
            neck_inches=round(inches, 2),
            neck_over_16=calculators.compute_neck_over_16(request.neck_size, request.neck_unit),
        )

    def age(self, age: float) -> AgeResponse:
        return AgeResponse(age_over_50=calculators.compute_age_over_50(age))

    def validate(self, field: str, value: str) -> FieldValidationResponse:
        error = validators.validate_field(field, value)
        if error is None:
            return FieldValidationResponse(field=field, valid=True)
        return FieldValidationResponse(field=field, valid=False, code=error.code, message=error.message)

    def practice(self, settings: Settings) -> PracticeInfo:
        pack = load_pack("practice")
        return PracticeInfo(
            name=settings.practice_name,
            specialty=settings.practice_specialty,
            initials=settings.practice_initials,
            phone=settings.practice_phone,
            actions=pack.get("actions", []),
            navigation=pack.get("navigation", []),
            breadcrumb=[BreadcrumbItem(**item) for item in pack.get("breadcrumb", [])],
        )


survey_service = SurveyService()
