"""Streamlit widgets bound to a FilterSession.

Widgets keep their own values in st.session_state under "w_<filter key>".
Callbacks push widget changes into the session, and sync_widget_state()
copies session values back into the widgets before they are drawn, so a
reset is reflected on the next rerun.
"""

from typing import List

import streamlit as st

from query_filters import FilterSession, is_supported, kind_of

WIDGET_PREFIX = "w_"


def widget_key(key: str, option: str = None) -> str:
    """Session-state key of the widget bound to a filter (or one set option)."""
    if option is None:
        return f"{WIDGET_PREFIX}{key}"
    return f"{WIDGET_PREFIX}{key}_{option}"


def sync_widget_state(session: FilterSession, set_options: dict) -> None:
    """
    Copy current session values into widget state.

    A value decoded from the URL with a different kind than the default (e.g.
    "abc" for a number filter) cannot be shown by the widget, so the widget
    falls back to the default.
    """
    for key, value in session.filters.items():
        if not is_supported(value) or kind_of(value) != session.template.kind(key):
            value = session.template[key]
        if key in set_options:
            for option in set_options[key]:
                st.session_state[widget_key(key, option)] = option in value
        else:
            st.session_state[widget_key(key)] = value


def _update_from_widget(session: FilterSession, key: str) -> None:
    session.update(key, st.session_state[widget_key(key)])


def _update_set_from_widgets(session: FilterSession, key: str, options: List[str]) -> None:
    selected = {o for o in options if st.session_state.get(widget_key(key, o))}
    session.update(key, selected)


def render_set_checkboxes(session: FilterSession, key: str, options: List[str]) -> None:
    """One checkbox per option; the checked options form the filter's set."""
    for option in options:
        st.checkbox(
            option,
            key=widget_key(key, option),
            on_change=_update_set_from_widgets,
            args=(session, key, options),
        )


def render_number_input(session: FilterSession, key: str, label: str) -> None:
    st.number_input(
        label,
        step=1,
        key=widget_key(key),
        on_change=_update_from_widget,
        args=(session, key),
    )


def render_text_input(session: FilterSession, key: str, label: str) -> None:
    st.text_input(
        label,
        key=widget_key(key),
        on_change=_update_from_widget,
        args=(session, key),
    )


def render_checkbox(session: FilterSession, key: str, label: str) -> None:
    st.checkbox(
        label,
        key=widget_key(key),
        on_change=_update_from_widget,
        args=(session, key),
    )


def render_reset_button(session: FilterSession, key: str, label: str) -> None:
    st.button(label, key=f"reset_{key}", on_click=session.reset_one, args=(key,))
