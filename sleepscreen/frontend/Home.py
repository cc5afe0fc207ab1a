"""Streamlit entrypoint for the sleep apnea screening survey."""
from __future__ import annotations

import asyncio

import httpx
import streamlit as st

from sleepscreen.content import load_pack
from sleepscreen.core.errors import IncompleteSubmission, SurveyError
from sleepscreen.frontend.components import (
    breadcrumb,
    calculators,
    contact_fields,
    header,
    results_panel,
    survey_form,
)
from sleepscreen.frontend.utils import api_client, state

st.set_page_config(page_title="Sleep Apnea Risk Assessment", layout="wide")

survey_state = state.get_state(st.session_state)

if survey_state.practice is None or not survey_state.questions:
    try:
        survey_state.practice = asyncio.run(api_client.get_practice())
        survey_state.questions = asyncio.run(api_client.list_questions())
    except httpx.HTTPError as exc:
        st.error(api_client.error_detail(exc))
        st.stop()

header.render_header(survey_state.practice)
breadcrumb.render_breadcrumb(survey_state.practice["breadcrumb"])

pack = load_pack("stop_bang")
session = survey_state.session

if survey_state.result:
    if results_panel.render_results(survey_state.result, session, survey_state.questions):
        survey_state.restart()
        st.rerun()
    st.stop()

st.title(pack["meta"]["title"])
st.write(pack["meta"]["intro"])
st.caption(" · ".join(pack["meta"]["highlights"]))

questions = {item["id"]: item for item in survey_state.questions}
for question_id, item in questions.items():
    with st.container(border=True):
        if question_id == "bmi_over_35":
            survey_form.render_question(survey_state, item)
            calculators.render_bmi_calculator(survey_state)
        elif question_id == "age_over_50":
            calculators.render_age_input(survey_state)
            survey_form.render_question(survey_state, item)
        elif question_id == "neck_over_16":
            calculators.render_neck_input(survey_state)
            survey_form.render_question(survey_state, item)
        else:
            survey_form.render_question(survey_state, item)
        error = survey_state.measurement_errors.get(question_id)
        if error:
            st.warning(error)

with st.expander("Additional Clinical Considerations (optional)"):
    factors = pack["additional_risk_factors"]
    options = {item["id"]: item["text"] for group in factors.values() for item in group}
    selected = st.multiselect(
        "Please indicate any additional factors that may be relevant to your sleep health assessment.",
        list(options),
        format_func=options.get,
        key=survey_state.key("risk-factors"),
    )
    session.set_additional_risk_factors(selected)

contact_fields.render_contact_fields(survey_state)

email_pack = pack["email_report"]
email_opt_in = st.checkbox(email_pack["label"], key=survey_state.key("email-results"), help=email_pack["description"])
session.set_email_results(email_opt_in)

st.caption(f"Status: {session.status.value}")

if st.button("Submit Assessment", type="primary"):
    try:
        session.ensure_complete()
        with st.spinner("Scoring your assessment..."):
            response = asyncio.run(api_client.submit_survey(session.to_submission()))
        session.attach_result(state.result_from_response(response))
    except IncompleteSubmission as exc:
        st.error(str(exc))
    except httpx.HTTPError as exc:
        st.error(api_client.error_detail(exc))
    except SurveyError as exc:
        st.error(str(exc))
    else:
        survey_state.result = response
        st.rerun()
