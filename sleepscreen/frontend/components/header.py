"""Branded practice header."""
from __future__ import annotations

from typing import Any, Dict

import streamlit as st


def render_header(practice: Dict[str, Any]) -> None:
    col_logo, col_name, col_contact = st.columns([0.6, 2.4, 1.6])
    col_logo.markdown(f"## {practice['initials']}")
    with col_name:
        st.markdown(f"### {practice['name']}")
        st.caption(practice["specialty"])
    with col_contact:
        st.markdown(f"**Call us:** {practice['phone']}")
        for action, column in zip(practice.get("actions", []), st.columns(2)):
            column.button(action, key=f"action-{action}", disabled=True)
    navigation = practice.get("navigation", [])
    if navigation:
        st.markdown(" | ".join(navigation))
    st.divider()
