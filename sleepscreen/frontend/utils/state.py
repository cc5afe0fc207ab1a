"""Session state helpers for Streamlit."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ...core.scoring import RiskTier, SurveyResult
from ...core.session import SurveySession


@dataclass
class SurveyState:
    session: SurveySession = field(default_factory=SurveySession)
    result: Optional[Dict[str, Any]] = None
    practice: Optional[Dict[str, Any]] = None
    questions: List[Dict[str, Any]] = field(default_factory=list)
    field_errors: Dict[str, str] = field(default_factory=dict)
    measurement_errors: Dict[str, str] = field(default_factory=dict)
    form_version: int = 0

    def key(self, name: str) -> str:
        """Widget key; bumping ``form_version`` hands out fresh, empty widgets."""

        return f"{name}-{self.form_version}"

    def restart(self) -> None:
        self.session.restart()
        self.result = None
        self.field_errors.clear()
        self.measurement_errors.clear()
        self.form_version += 1


def get_state(session_state) -> SurveyState:
    if "survey_state" not in session_state:
        session_state.survey_state = SurveyState()
    return session_state.survey_state


def result_from_response(response: Dict[str, Any]) -> SurveyResult:
    return SurveyResult(
        score=response["score"],
        risk_tier=RiskTier(response["risk_tier"]),
        respondent_name=response["respondent_name"],
        assessment_id=response["assessment_id"],
        email_report_requested=response.get("email_report_requested", False),
        additional_risk_factors=tuple(response.get("additional_risk_factors", [])),
        max_score=response.get("max_score", 8),
    )
