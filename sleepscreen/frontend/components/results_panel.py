"""Results screen: score, risk tier, clinical text, print and restart."""
from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from ...content import load_pack
from ...core.answers import Provenance, Question
from ...core.session import SurveySession

_PRINT_BUTTON = """
<button onclick="window.parent.print()"
        style="padding:0.5rem 1rem;border-radius:0.5rem;border:1px solid #2563eb;
               background:#2563eb;color:white;cursor:pointer;">
  Print Report
</button>
"""

_TIER_STYLE = {"Low Risk": st.success, "Intermediate Risk": st.warning, "High Risk": st.error}


def answers_table(session: SurveySession, questions: List[Dict[str, Any]]) -> pd.DataFrame:
    """One row per question with the answer and where it came from."""

    titles = {item["id"]: item["title"] for item in questions}
    rows = []
    for question in Question:
        slot = session.answers.slot(question)
        rows.append(
            {
                "Question": titles.get(question.value, question.value),
                "Answer": slot.answer.value.capitalize(),
                "Source": "Calculated" if slot.provenance is Provenance.DERIVED else "Answered",
            }
        )
    return pd.DataFrame(rows)


def render_results(result: Dict[str, Any], session: SurveySession, questions: List[Dict[str, Any]]) -> bool:
    """Render the result view. Returns True when the user asked to restart."""

    pack = load_pack("stop_bang")
    st.header("Sleep Apnea Risk Evaluation Report")
    st.markdown(f"**{result['greeting']}**")
    st.caption(f"Assessment ID: #{result['assessment_id']}")

    col_score, col_tier = st.columns(2)
    col_score.metric("STOP-BANG score", f"{result['score']}/{result['max_score']}")
    with col_tier:
        show = _TIER_STYLE.get(result["risk_tier"], st.info)
        show(result["risk_tier"])

    guidance = result.get("guidance")
    if guidance:
        st.markdown(f"**Clinical Significance:** {guidance['clinical_significance']}")
        st.subheader(guidance["assessment_title"])
        st.write(guidance["assessment"])
        st.markdown(f"**{guidance['recommendation_title']}**")
        st.write(guidance["recommendation"])

    st.subheader("Your answers")
    st.dataframe(answers_table(session, questions), use_container_width=True, hide_index=True)

    factors = result.get("additional_risk_factors") or []
    if factors:
        labels = {
            item["id"]: item["text"]
            for group in pack["additional_risk_factors"].values()
            for item in group
        }
        st.subheader("Additional factors you reported")
        st.write("\n".join(f"- {labels.get(factor, factor)}" for factor in factors))

    st.subheader("Recommended Next Steps")
    st.write("\n".join(f"{index}. {step}" for index, step in enumerate(pack["next_steps"], start=1)))

    if result.get("email_report_requested"):
        st.success(f"Email Delivery Confirmed. {pack['email_report']['confirmation']}")

    st.info(pack["disclaimer"])

    col_print, col_restart = st.columns(2)
    with col_print:
        components.html(_PRINT_BUTTON, height=60)
    return col_restart.button("New Assessment", type="primary")
