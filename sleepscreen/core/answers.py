"""Value types for STOP-BANG answers, measurements and contact details."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

__all__ = [
    "Answer",
    "AnswerSlot",
    "BodyMetrics",
    "ContactInfo",
    "DERIVED_QUESTIONS",
    "MAX_SCORE",
    "NeckMeasurement",
    "Provenance",
    "Question",
    "SurveyAnswers",
]


class Question(str, Enum):
    """The eight STOP-BANG items, in questionnaire order."""

    SNORING = "snoring"
    TIRED = "tired"
    OBSERVED = "observed"
    PRESSURE = "pressure"
    BMI_OVER_35 = "bmi_over_35"
    AGE_OVER_50 = "age_over_50"
    NECK_OVER_16 = "neck_over_16"
    GENDER_MALE = "gender_male"


DERIVED_QUESTIONS = frozenset({Question.BMI_OVER_35, Question.AGE_OVER_50, Question.NECK_OVER_16})
MAX_SCORE = len(Question)


class Answer(str, Enum):
    """Explicit tri-state answer; UNANSWERED is never the same as NO."""

    UNANSWERED = "unanswered"
    YES = "yes"
    NO = "no"

    @classmethod
    def from_bool(cls, value: Optional[bool]) -> "Answer":
        if value is None:
            return cls.UNANSWERED
        return cls.YES if value else cls.NO

    def as_bool(self) -> Optional[bool]:
        if self is Answer.UNANSWERED:
            return None
        return self is Answer.YES


class Provenance(str, Enum):
    USER = "user"
    DERIVED = "derived"


@dataclass(frozen=True)
class AnswerSlot:
    answer: Answer = Answer.UNANSWERED
    provenance: Provenance = Provenance.USER


@dataclass
class SurveyAnswers:
    """One slot per question; the single source of truth for each answer."""

    slots: Dict[Question, AnswerSlot] = field(default_factory=lambda: {q: AnswerSlot() for q in Question})

    def slot(self, question: Question) -> AnswerSlot:
        return self.slots[Question(question)]

    def get(self, question: Question) -> Answer:
        return self.slot(question).answer

    def set(self, question: Question, answer: Answer, provenance: Provenance = Provenance.USER) -> None:
        self.slots[Question(question)] = AnswerSlot(Answer(answer), provenance)

    def clear(self, question: Question) -> None:
        self.slots[Question(question)] = AnswerSlot()

    def unanswered(self) -> List[Question]:
        return [q for q in Question if self.slots[q].answer is Answer.UNANSWERED]

    def is_complete(self) -> bool:
        return not self.unanswered()

    def as_dict(self) -> Dict[str, str]:
        return {q.value: self.slots[q].answer.value for q in Question}

    def as_booleans(self) -> Dict[Question, Optional[bool]]:
        return {q: self.slots[q].answer.as_bool() for q in Question}

    @classmethod
    def from_bools(cls, values: Dict[Question, Optional[bool]]) -> "SurveyAnswers":
        answers = cls()
        for question, value in values.items():
            answers.set(question, Answer.from_bool(value))
        return answers


@dataclass(frozen=True)
class BodyMetrics:
    height: float
    height_unit: str
    weight: float
    weight_unit: str


@dataclass(frozen=True)
class NeckMeasurement:
    size: float
    unit: str


@dataclass
class ContactInfo:
    full_name: str = ""
    email: str = ""
    phone: str = ""

    def missing(self) -> List[str]:
        """Names of the contact fields that are blank after trimming."""

        return [name for name in ("full_name", "email", "phone") if not getattr(self, name).strip()]

    def is_filled(self) -> bool:
        return not self.missing()

