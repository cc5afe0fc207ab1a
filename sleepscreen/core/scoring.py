"""STOP-BANG score and risk tier classification."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..content import load_pack
from .answers import MAX_SCORE, Answer, Question, SurveyAnswers
from .errors import IncompleteSubmission

__all__ = ["RiskTier", "SurveyResult", "classify_risk", "compute_score"]


class RiskTier(str, Enum):
    LOW = "Low Risk"
    INTERMEDIATE = "Intermediate Risk"
    HIGH = "High Risk"
    UNKNOWN = "Unknown Risk"

    @property
    def guidance(self) -> Optional[Dict[str, Any]]:
        """Tier-specific clinical text from the content pack."""

        return load_pack("stop_bang").get("tiers", {}).get(self.value)


def compute_score(answers: SurveyAnswers) -> int:
    """Count the questions answered YES.

    Only defined once every question has been answered.
    """

    missing = answers.unanswered()
    if missing:
        raise IncompleteSubmission(missing_questions=[q.value for q in missing])
    return sum(1 for question in Question if answers.get(question) is Answer.YES)


def classify_risk(score: int) -> RiskTier:
    if 0 <= score <= 2:
        return RiskTier.LOW
    if 3 <= score <= 4:
        return RiskTier.INTERMEDIATE
    if 5 <= score <= 8:
        return RiskTier.HIGH
    return RiskTier.UNKNOWN


@dataclass(frozen=True)
class SurveyResult:
    """Outcome of a submitted survey. Built once, never mutated."""

    score: int
    risk_tier: RiskTier
    respondent_name: str
    assessment_id: str
    email_report_requested: bool = False
    additional_risk_factors: Tuple[str, ...] = ()
    max_score: int = MAX_SCORE

    @property
    def greeting(self) -> str:
        return f"Thank you, {self.respondent_name.strip()}. Here is your STOP-BANG assessment."
