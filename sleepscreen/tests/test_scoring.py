from __future__ import annotations

import dataclasses
from itertools import combinations

import pytest

from sleepscreen.core.answers import Answer, Question, SurveyAnswers
from sleepscreen.core.errors import IncompleteSubmission
from sleepscreen.core.scoring import RiskTier, SurveyResult, classify_risk, compute_score

_TIER_ORDER = [RiskTier.LOW, RiskTier.INTERMEDIATE, RiskTier.HIGH]


def answers_with_yes(yes: set) -> SurveyAnswers:
    return SurveyAnswers.from_bools({question: question in yes for question in Question})


@pytest.mark.parametrize("k", range(9))
def test_score_counts_yes_answers(k):
    for chosen in combinations(list(Question), k):
        assert compute_score(answers_with_yes(set(chosen))) == k


def test_score_requires_every_answer():
    answers = answers_with_yes({Question.SNORING})
    answers.clear(Question.GENDER_MALE)
    with pytest.raises(IncompleteSubmission) as exc_info:
        compute_score(answers)
    assert exc_info.value.missing_questions == ("gender_male",)


def test_unanswered_is_not_counted_as_no():
    answers = SurveyAnswers()
    assert answers.get(Question.SNORING) is Answer.UNANSWERED
    assert Answer.UNANSWERED.as_bool() is None
    assert Answer.NO.as_bool() is False


@pytest.mark.parametrize(
    "score, tier",
    [
        (0, RiskTier.LOW),
        (2, RiskTier.LOW),
        (3, RiskTier.INTERMEDIATE),
        (4, RiskTier.INTERMEDIATE),
        (5, RiskTier.HIGH),
        (8, RiskTier.HIGH),
        (-1, RiskTier.UNKNOWN),
        (9, RiskTier.UNKNOWN),
    ],
)
def test_classify_risk(score, tier):
    assert classify_risk(score) is tier


def test_classification_is_monotonic():
    ranks = [_TIER_ORDER.index(classify_risk(score)) for score in range(9)]
    assert ranks == sorted(ranks)


def test_tier_labels():
    assert RiskTier.LOW.value == "Low Risk"
    assert RiskTier.UNKNOWN.value == "Unknown Risk"


def test_guidance_available_for_known_tiers():
    for tier in _TIER_ORDER:
        guidance = tier.guidance
        assert guidance["clinical_significance"]
        assert guidance["recommendation"]
    assert RiskTier.HIGH.guidance["recommendation_title"] == "Urgent Clinical Recommendations"
    assert RiskTier.UNKNOWN.guidance is None


def test_as_booleans_keeps_unanswered_as_none():
    answers = SurveyAnswers()
    answers.set(Question.SNORING, Answer.YES)
    answers.set(Question.TIRED, Answer.NO)
    values = answers.as_booleans()
    assert values[Question.SNORING] is True
    assert values[Question.TIRED] is False
    assert values[Question.GENDER_MALE] is None
    assert list(values) == list(Question)


def test_survey_result_is_immutable():
    result = SurveyResult(score=3, risk_tier=RiskTier.INTERMEDIATE, respondent_name="Jane", assessment_id="AB12CD34")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.score = 8
    assert result.max_score == 8
