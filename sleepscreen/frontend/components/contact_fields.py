"""Contact details with inline validation on field exit."""
from __future__ import annotations

import streamlit as st

from ...core.validators import validate_field
from ..utils.state import SurveyState

FIELDS = (
    ("full_name", "Full name", "Jane Doe"),
    ("email", "Email", "name@example.com"),
    ("phone", "Phone", "(555) 555-5555"),
)


def _on_exit(state: SurveyState, field: str) -> None:
    # Streamlit fires on_change when the input loses focus or Enter is pressed.
    value = st.session_state[state.key(f"contact-{field}")]
    state.session.set_contact(**{field: value})
    error = validate_field(field, value)
    if error:
        state.field_errors[field] = error.message
    else:
        state.field_errors.pop(field, None)


def render_contact_fields(state: SurveyState) -> None:
    st.subheader("Contact Information")
    for field, label, placeholder in FIELDS:
        st.text_input(
            label,
            placeholder=placeholder,
            key=state.key(f"contact-{field}"),
            on_change=_on_exit,
            args=(state, field),
        )
        if field in state.field_errors:
            st.error(state.field_errors[field])
