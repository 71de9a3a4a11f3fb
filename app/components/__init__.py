"""Reusable UI components for the query filters demo."""

from .filter_widgets import (
    widget_key,
    sync_widget_state,
    render_set_checkboxes,
    render_number_input,
    render_text_input,
    render_checkbox,
    render_reset_button,
)

__all__ = [
    "widget_key",
    "sync_widget_state",
    "render_set_checkboxes",
    "render_number_input",
    "render_text_input",
    "render_checkbox",
    "render_reset_button",
]
