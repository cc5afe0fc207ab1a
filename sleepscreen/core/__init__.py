"""Pure STOP-BANG screening logic: scoring, calculators, validators, session."""

from .answers import Answer, ContactInfo, Provenance, Question, SurveyAnswers
from .calculators import compute_age_over_50, compute_bmi, compute_neck_over_16
from .errors import IncompleteSubmission, InvalidMeasurement, SurveyError
from .scoring import RiskTier, SurveyResult, classify_risk, compute_score
from .session import SurveySession, SurveyStatus
from .validators import validate_email, validate_name, validate_phone

__all__ = [
    "Answer",
    "ContactInfo",
    "IncompleteSubmission",
    "InvalidMeasurement",
    "Provenance",
    "Question",
    "RiskTier",
    "SurveyAnswers",
    "SurveyError",
    "SurveyResult",
    "SurveySession",
    "SurveyStatus",
    "classify_risk",
    "compute_age_over_50",
    "compute_bmi",
    "compute_neck_over_16",
    "compute_score",
    "validate_email",
    "validate_name",
    "validate_phone",
]
