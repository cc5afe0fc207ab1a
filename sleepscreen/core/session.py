"""In-memory survey session implementing the completion gate."""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..content import load_pack
from .answers import (
    DERIVED_QUESTIONS,
    Answer,
    BodyMetrics,
    ContactInfo,
    NeckMeasurement,
    Provenance,
    Question,
    SurveyAnswers,
)
from .calculators import (
    HeightUnit,
    NeckUnit,
    WeightUnit,
    compute_age_over_50,
    compute_neck_over_16,
    evaluate_body_metrics,
)
from .errors import (
    DerivedAnswerLocked,
    IncompleteSubmission,
    SurveyAlreadySubmitted,
    UnknownRiskFactor,
)
from .scoring import SurveyResult, classify_risk, compute_score

logger = logging.getLogger(__name__)


class SurveyStatus(str, Enum):
    IN_PROGRESS = "InProgress"
    COMPLETE = "Complete"
    SUBMITTED = "Submitted"


def known_risk_factors() -> List[str]:
    factors = load_pack("stop_bang").get("additional_risk_factors", {})
    return [item["id"] for group in factors.values() for item in group]


@dataclass
class SurveySession:
    """A single respondent's survey, scoped to one browser tab.

    Derived questions (BMI, age, neck) are owned by their measurement while
    one exists: recalculated on every change and reset to UNANSWERED when
    the measurement is cleared.
    """

    answers: SurveyAnswers = field(default_factory=SurveyAnswers)
    contact: ContactInfo = field(default_factory=ContactInfo)
    body_metrics: Optional[BodyMetrics] = None
    bmi: Optional[float] = None
    neck: Optional[NeckMeasurement] = None
    age: Optional[float] = None
    height_unit: HeightUnit = HeightUnit.CM
    weight_unit: WeightUnit = WeightUnit.KG
    neck_unit: NeckUnit = NeckUnit.INCHES
    email_results: bool = False
    additional_risk_factors: List[str] = field(default_factory=list)
    result: Optional[SurveyResult] = None

    @property
    def status(self) -> SurveyStatus:
        if self.result is not None:
            return SurveyStatus.SUBMITTED
        if self.answers.is_complete() and self.contact.is_filled():
            return SurveyStatus.COMPLETE
        return SurveyStatus.IN_PROGRESS

    def _ensure_open(self) -> None:
        if self.result is not None:
            raise SurveyAlreadySubmitted()

    def has_measurement(self, question: Question) -> bool:
        if question is Question.BMI_OVER_35:
            return self.body_metrics is not None
        if question is Question.NECK_OVER_16:
            return self.neck is not None
        if question is Question.AGE_OVER_50:
            return self.age is not None
        return False

    def is_derived(self, question: Question) -> bool:
        return self.answers.slot(question).provenance is Provenance.DERIVED

    # Answers -------------------------------------------------------------

    def set_answer(self, question: Question, value: Optional[bool]) -> None:
        self._ensure_open()
        question = Question(question)
        if question in DERIVED_QUESTIONS and self.has_measurement(question):
            raise DerivedAnswerLocked(question.value)
        self.answers.set(question, Answer.from_bool(value), Provenance.USER)

    def _derive(self, question: Question, value: bool) -> None:
        self.answers.set(question, Answer.from_bool(value), Provenance.DERIVED)

    # Measurements --------------------------------------------------------

    def set_body_metrics(self, height: Any, height_unit: Any, weight: Any, weight_unit: Any) -> float:
        self._ensure_open()
        evaluated = evaluate_body_metrics(height, height_unit, weight, weight_unit)
        self.height_unit = HeightUnit(height_unit)
        self.weight_unit = WeightUnit(weight_unit)
        self.body_metrics = BodyMetrics(float(height), self.height_unit.value, float(weight), self.weight_unit.value)
        self.bmi = evaluated.bmi
        self._derive(Question.BMI_OVER_35, evaluated.over_35)
        return evaluated.bmi

    def clear_body_metrics(self) -> None:
        self._ensure_open()
        self.body_metrics = None
        self.bmi = None
        self.answers.clear(Question.BMI_OVER_35)

    def set_neck(self, size: Any, unit: Any) -> bool:
        self._ensure_open()
        over = compute_neck_over_16(size, unit)
        self.neck_unit = NeckUnit(unit)
        self.neck = NeckMeasurement(float(size), self.neck_unit.value)
        self._derive(Question.NECK_OVER_16, over)
        return over

    def set_neck_unit(self, unit: Any) -> None:
        """Switch the neck unit, recalculating when a size is present."""

        self._ensure_open()
        if self.neck is not None:
            self.set_neck(self.neck.size, unit)
        else:
            self.neck_unit = NeckUnit(unit)

    def clear_neck(self) -> None:
        self._ensure_open()
        self.neck = None
        self.answers.clear(Question.NECK_OVER_16)

    def set_age(self, age: Any) -> bool:
        self._ensure_open()
        over = compute_age_over_50(age)
        self.age = float(age)
        self._derive(Question.AGE_OVER_50, over)
        return over

    def clear_age(self) -> None:
        self._ensure_open()
        self.age = None
        self.answers.clear(Question.AGE_OVER_50)

    # Contact and extras --------------------------------------------------

    def set_contact(
        self,
        *,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> None:
        self._ensure_open()
        if full_name is not None:
            self.contact.full_name = full_name
        if email is not None:
            self.contact.email = email
        if phone is not None:
            self.contact.phone = phone

    def set_email_results(self, enabled: bool) -> None:
        self._ensure_open()
        self.email_results = bool(enabled)

    def set_additional_risk_factors(self, factor_ids: Iterable[str]) -> None:
        self._ensure_open()
        allowed = known_risk_factors()
        selected = []
        for factor_id in factor_ids:
            if factor_id not in allowed:
                raise UnknownRiskFactor(factor_id)
            if factor_id not in selected:
                selected.append(factor_id)
        self.additional_risk_factors = selected

    # Gate ----------------------------------------------------------------

    def ensure_complete(self) -> None:
        missing_questions = [q.value for q in self.answers.unanswered()]
        missing_contact = self.contact.missing()
        if missing_questions or missing_contact:
            raise IncompleteSubmission(missing_questions, missing_contact)

    def submit(self) -> SurveyResult:
        self._ensure_open()
        self.ensure_complete()
        score = compute_score(self.answers)
        tier = classify_risk(score)
        result = SurveyResult(
            score=score,
            risk_tier=tier,
            respondent_name=self.contact.full_name,
            assessment_id=uuid.uuid4().hex[:8].upper(),
            email_report_requested=self.email_results,
            additional_risk_factors=tuple(self.additional_risk_factors),
        )
        self.result = result
        logger.info("Survey %s submitted: score=%s tier=%s", result.assessment_id, score, tier.value)
        return result

    def attach_result(self, result: SurveyResult) -> None:
        """Record a result scored elsewhere (the API) for this session."""

        self._ensure_open()
        self.ensure_complete()
        self.result = result

    def restart(self) -> None:
        """Discard the result and clear every field back to its default."""

        fresh = SurveySession()
        for item in fields(self):
            setattr(self, item.name, getattr(fresh, item.name))

    # Serialisation -------------------------------------------------------

    def to_submission(self) -> Dict[str, Any]:
        body = None
        if self.body_metrics is not None:
            body = {
                "height": self.body_metrics.height,
                "height_unit": self.body_metrics.height_unit,
                "weight": self.body_metrics.weight,
                "weight_unit": self.body_metrics.weight_unit,
            }
        neck = None
        if self.neck is not None:
            neck = {"size": self.neck.size, "unit": self.neck.unit}
        return {
            "answers": self.answers.as_dict(),
            "body_metrics": body,
            "neck": neck,
            "age": self.age,
            "contact": {
                "full_name": self.contact.full_name,
                "email": self.contact.email,
                "phone": self.contact.phone,
            },
            "email_results": self.email_results,
            "additional_risk_factors": list(self.additional_risk_factors),
        }

    @classmethod
    def from_submission(cls, payload: Mapping[str, Any]) -> "SurveySession":
        """Rebuild a session; measurements override submitted derived answers."""

        session = cls()
        for key, value in (payload.get("answers") or {}).items():
            session.answers.set(Question(key), Answer(value), Provenance.USER)
        body = payload.get("body_metrics")
        if body:
            session.set_body_metrics(body["height"], body["height_unit"], body["weight"], body["weight_unit"])
        neck = payload.get("neck")
        if neck:
            session.set_neck(neck["size"], neck["unit"])
        if payload.get("age") is not None:
            session.set_age(payload["age"])
        contact = payload.get("contact") or {}
        session.set_contact(
            full_name=contact.get("full_name", ""),
            email=contact.get("email", ""),
            phone=contact.get("phone", ""),
        )
        session.set_email_results(payload.get("email_results", False))
        session.set_additional_risk_factors(payload.get("additional_risk_factors") or [])
        return session
