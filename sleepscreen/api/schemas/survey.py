"""Pydantic schemas for survey submission and results."""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from ...core.answers import Answer, Question
from ...core.calculators import HeightUnit, NeckUnit, WeightUnit
from ...core.scoring import RiskTier


class BodyMetricsIn(BaseModel):
    height: float
    height_unit: HeightUnit = HeightUnit.CM
    weight: float
    weight_unit: WeightUnit = WeightUnit.KG


class NeckIn(BaseModel):
    size: float
    unit: NeckUnit = NeckUnit.INCHES


class ContactIn(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""


class SurveySubmission(BaseModel):
    answers: Dict[Question, Answer] = Field(default_factory=dict)
    body_metrics: Optional[BodyMetricsIn] = None
    neck: Optional[NeckIn] = None
    age: Optional[float] = None
    contact: ContactIn = Field(default_factory=ContactIn)
    email_results: bool = False
    additional_risk_factors: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class TierGuidance(BaseModel):
    clinical_significance: str
    assessment_title: str
    assessment: str
    recommendation_title: str
    recommendation: str


class SurveyResultResponse(BaseModel):
    assessment_id: str
    score: int = Field(ge=0, le=8)
    max_score: int = 8
    risk_tier: RiskTier
    respondent_name: str
    greeting: str
    guidance: Optional[TierGuidance] = None
    email_report_requested: bool = False
    additional_risk_factors: List[str] = Field(default_factory=list)


class QuestionItem(BaseModel):
    id: Question
    title: str
    description: str
    derived: bool = False
