"""STOP-BANG yes/no questions."""
from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

from ...core.answers import Answer, Question
from ...core.errors import SurveyError
from ..utils.state import SurveyState

OPTIONS = ["Not answered", "Yes", "No"]
_TO_BOOL = {"Not answered": None, "Yes": True, "No": False}
_FROM_ANSWER = {Answer.UNANSWERED: "Not answered", Answer.YES: "Yes", Answer.NO: "No"}


def _on_answer(state: SurveyState, question: Question, key: str) -> None:
    value: Optional[bool] = _TO_BOOL[st.session_state[key]]
    try:
        state.session.set_answer(question, value)
    except SurveyError as exc:
        state.measurement_errors[question.value] = str(exc)
    else:
        state.measurement_errors.pop(question.value, None)


def render_question(state: SurveyState, item: Dict[str, Any]) -> None:
    """Radio group for one question, or its calculated value when derived."""

    question = Question(item["id"])
    session = state.session
    st.markdown(f"**{item['title']}**")
    st.caption(item["description"])

    if session.has_measurement(question):
        answer = session.answers.get(question)
        st.info(f"Calculated: {_FROM_ANSWER[answer]}")
        return

    key = state.key(f"answer-{question.value}")
    st.session_state.setdefault(key, _FROM_ANSWER[session.answers.get(question)])
    st.radio(
        item["title"],
        OPTIONS,
        key=key,
        horizontal=True,
        label_visibility="collapsed",
        on_change=_on_answer,
        args=(state, question, key),
    )
