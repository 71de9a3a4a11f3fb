"""
Query Filters - Demo Streamlit Application

Filters a small orders table. Edits stay local until "Apply filters" writes
the active filters to the URL; the URL can then be shared or bookmarked.

Run with: streamlit run app/main.py
"""

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from config import config, setup_logging, get_logger
from config.logging_config import DEFAULT_LOG_FILE
from config.config_loader import load_filter_config, load_filter_template, get_option_values
from query_filters import FilterSession, QuerySync, UnsupportedType, filter_frame
from query_filters.codec import encode
from query_filters.streamlit_params import StreamlitQueryParams

from app.components import (
    sync_widget_state,
    render_set_checkboxes,
    render_number_input,
    render_text_input,
    render_checkbox,
    render_reset_button,
)

SYNC_STATE_KEY = "query_filters_sync"

logger = get_logger("app")


@st.cache_data
def load_sample_orders() -> pd.DataFrame:
    """Sample orders shown in the demo."""
    return pd.DataFrame({
        "order_id": [1001, 1002, 1003, 1004, 1005, 1006],
        "name": ["Alice", "Bob", "Carol", "Dave", "Alicia", "Bob"],
        "age": [34, 28, 34, 45, 22, 28],
        "is_paid": [True, False, True, True, False, True],
        "statuses": ["completed", "canceled", "delivered", "completed", "canceled", "delivered"],
    })


def get_sync() -> QuerySync:
    """Get the filter sync for this browser session, creating it on first run."""
    if SYNC_STATE_KEY not in st.session_state:
        params = StreamlitQueryParams()
        session = FilterSession(
            load_filter_template(),
            params,
            typed=config.filters.typed_decoding,
        )
        st.session_state[SYNC_STATE_KEY] = QuerySync(session, params)
        logger.info("Created filter session")
    return st.session_state[SYNC_STATE_KEY]


def _apply(sync: QuerySync) -> None:
    try:
        sync.apply()
    except UnsupportedType as e:
        st.session_state["apply_error"] = str(e)


def _describe(value) -> str:
    try:
        return encode(value)
    except UnsupportedType:
        return repr(value)


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title=config.app.name,
        page_icon="🔎",
        layout="wide",
    )
    setup_logging(
        config.app.log_level,
        log_file=DEFAULT_LOG_FILE if config.app.log_to_file else None,
    )

    sync = get_sync()
    # Browser navigation changes the URL behind the session's back
    sync.refresh()
    session = sync.session

    template_name = config.filters.default_template
    statuses = get_option_values(template_name, "statuses", load_filter_config())
    set_options = {"statuses": statuses}
    sync_widget_state(session, set_options)

    st.title(f"🔎 {config.app.name}")
    st.caption(f"v{config.app.version}")

    col1, col2 = st.columns([1, 2])

    with col1:
        st.subheader("Filters")
        render_set_checkboxes(session, "statuses", statuses)
        render_number_input(session, "age", "Age")
        render_text_input(session, "name", "Name")
        render_checkbox(session, "is_paid", "Paid")

        st.write(f"Active filters count: {session.active_count()}")
        if session.is_active("name"):
            st.caption("Name filter active")
        if session.is_active("age"):
            st.caption("Age filter active")

        render_reset_button(session, "name", "Reset name filter")
        render_reset_button(session, "age", "Reset age filter")
        render_reset_button(session, "statuses", "Reset statuses filter")

        st.button("Apply filters", type="primary", on_click=_apply, args=(sync,))
        st.button("Clear filters", on_click=session.reset_all)

        if "apply_error" in st.session_state:
            st.error(st.session_state.pop("apply_error"))

    with col2:
        applied = sync.applied_filters
        st.subheader("Applied filters")
        st.json({key: _describe(value) for key, value in applied.items()})

        orders = filter_frame(load_sample_orders(), applied)
        st.dataframe(orders, use_container_width=True, hide_index=True)


if __name__ == "__main__":
    main()
