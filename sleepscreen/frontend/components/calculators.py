"""BMI, age and neck size inputs that fill the derived questions."""
from __future__ import annotations

import streamlit as st

from ...core.answers import Question
from ...core.calculators import MAX_AGE, HeightUnit, NeckUnit, WeightUnit
from ...core.errors import InvalidMeasurement
from ..utils.state import SurveyState

UNIT_SYSTEMS = {
    "Metric (cm / kg)": (HeightUnit.CM, WeightUnit.KG),
    "Imperial (in / lbs)": (HeightUnit.IN, WeightUnit.LBS),
}
NECK_UNITS = {"inches": NeckUnit.INCHES, "cm": NeckUnit.CM}


def _calculate_bmi(state: SurveyState) -> None:
    height_unit, weight_unit = UNIT_SYSTEMS[st.session_state[state.key("bmi-units")]]
    try:
        state.session.set_body_metrics(
            st.session_state[state.key("bmi-height")],
            height_unit,
            st.session_state[state.key("bmi-weight")],
            weight_unit,
        )
    except InvalidMeasurement:
        state.measurement_errors["bmi"] = "Please enter valid height and weight values"
    else:
        state.measurement_errors.pop("bmi", None)


def _reset_bmi(state: SurveyState) -> None:
    state.session.clear_body_metrics()
    state.measurement_errors.pop("bmi", None)
    st.session_state[state.key("bmi-height")] = None
    st.session_state[state.key("bmi-weight")] = None


def render_bmi_calculator(state: SurveyState) -> None:
    st.markdown("##### BMI Calculator")
    st.caption("Calculate your BMI to determine if it's over 35.")
    units = st.radio("Units", list(UNIT_SYSTEMS), key=state.key("bmi-units"), horizontal=True)
    height_unit, weight_unit = UNIT_SYSTEMS[units]
    col_h, col_w = st.columns(2)
    col_h.number_input(f"Height ({height_unit.value})", min_value=0.0, value=None, key=state.key("bmi-height"))
    col_w.number_input(f"Weight ({weight_unit.value})", min_value=0.0, value=None, key=state.key("bmi-weight"))
    col_calc, col_reset = st.columns(2)
    col_calc.button("Calculate BMI", key=state.key("bmi-calc"), on_click=_calculate_bmi, args=(state,))
    col_reset.button("Reset", key=state.key("bmi-reset"), on_click=_reset_bmi, args=(state,))

    if "bmi" in state.measurement_errors:
        st.error(state.measurement_errors["bmi"])
    if state.session.bmi is not None:
        over = state.session.answers.get(Question.BMI_OVER_35).as_bool()
        st.success(f"Your BMI: {state.session.bmi:.1f} | BMI over 35: {'Yes' if over else 'No'}")


def _on_age(state: SurveyState) -> None:
    value = st.session_state[state.key("age")]
    if value is None:
        state.session.clear_age()
        state.measurement_errors.pop("age", None)
        return
    try:
        state.session.set_age(value)
    except InvalidMeasurement:
        state.session.clear_age()
        state.measurement_errors["age"] = "Please enter a valid age"
    else:
        state.measurement_errors.pop("age", None)


def render_age_input(state: SurveyState) -> None:
    st.number_input(
        "Your age (years)",
        min_value=0,
        max_value=MAX_AGE,
        value=None,
        step=1,
        key=state.key("age"),
        on_change=_on_age,
        args=(state,),
    )
    if "age" in state.measurement_errors:
        st.error(state.measurement_errors["age"])


def _on_neck(state: SurveyState) -> None:
    size = st.session_state[state.key("neck-size")]
    unit = NECK_UNITS[st.session_state[state.key("neck-unit")]]
    if size is None:
        state.session.clear_neck()
        state.session.set_neck_unit(unit)
        state.measurement_errors.pop("neck", None)
        return
    try:
        state.session.set_neck(size, unit)
    except InvalidMeasurement:
        state.session.clear_neck()
        state.measurement_errors["neck"] = "Please enter a valid neck size"
    else:
        state.measurement_errors.pop("neck", None)


def render_neck_input(state: SurveyState) -> None:
    col_size, col_unit = st.columns([2, 1])
    col_unit.radio(
        "Unit",
        list(NECK_UNITS),
        key=state.key("neck-unit"),
        horizontal=True,
        on_change=_on_neck,
        args=(state,),
    )
    col_size.number_input(
        "Neck circumference",
        min_value=0.0,
        value=None,
        key=state.key("neck-size"),
        on_change=_on_neck,
        args=(state,),
    )
    if "neck" in state.measurement_errors:
        st.error(state.measurement_errors["neck"])
