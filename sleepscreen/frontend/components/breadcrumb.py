"""Breadcrumb strip shown under the header."""
from __future__ import annotations

from typing import Iterable, Mapping

import streamlit as st


def breadcrumb_markdown(items: Iterable[Mapping[str, object]]) -> str:
    """Render breadcrumb items as markdown; the current item is not a link."""

    parts = []
    for item in items:
        label = str(item["label"])
        if item.get("current"):
            parts.append(f"**{label}**")
        else:
            parts.append(f"[{label}]({item.get('href') or '#'})")
    return " > ".join(parts)


def render_breadcrumb(items: Iterable[Mapping[str, object]]) -> None:
    st.markdown(breadcrumb_markdown(items))
