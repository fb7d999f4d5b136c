"""Shared UI utilities: session state initialisation, parameter controls, sidebar."""
from __future__ import annotations

import logging

import streamlit as st

from bass_studio.core.config import LOGGER_NAME, M_LIMITS, P_LIMITS, PERIOD_LIMITS, Q_LIMITS
from bass_studio.services.session import BassSession

logger = logging.getLogger(LOGGER_NAME)

_WIDGET_KEYS = {"p": "param_p", "q": "param_q", "m": "param_m", "periods": "param_periods"}

_CSS = """
<style>
/* ── Metric tiles ────────────────────────────────────────────────────── */
div[data-testid="metric-container"] {
    background: #f8fafc;
    border: 1px solid #e2e8f0;
    border-radius: 10px;
    padding: 0.75rem 1rem 0.5rem;
}

/* ── Download buttons ────────────────────────────────────────────────── */
div.stDownloadButton > button {
    border-radius: 8px;
    font-weight: 500;
}
</style>
"""


def _init_state() -> None:
    if "bass_session" not in st.session_state:
        st.session_state.bass_session = BassSession()
    if "show_historical" not in st.session_state:
        st.session_state.show_historical = True
    params = st.session_state.bass_session.params
    for field, key in _WIDGET_KEYS.items():
        if key not in st.session_state:
            st.session_state[key] = getattr(params, field)


def get_session() -> BassSession:
    return st.session_state.bass_session


def _on_param_change(field: str) -> None:
    value = st.session_state[_WIDGET_KEYS[field]]
    if value is None:
        return
    get_session().update(field, int(value) if field == "periods" else float(value))


def render_parameter_controls() -> None:
    """Sliders and number inputs that push every change into the parameter store."""
    left, right = st.columns(2)
    with left:
        st.slider(
            "Innovation coefficient (p)",
            min_value=P_LIMITS.min_value,
            max_value=P_LIMITS.max_value,
            step=P_LIMITS.step,
            format="%.4f",
            key=_WIDGET_KEYS["p"],
            on_change=_on_param_change,
            args=("p",),
            help="Adoption driven by external influence, independent of prior adopters.",
        )
        st.slider(
            "Imitation coefficient (q)",
            min_value=Q_LIMITS.min_value,
            max_value=Q_LIMITS.max_value,
            step=Q_LIMITS.step,
            format="%.3f",
            key=_WIDGET_KEYS["q"],
            on_change=_on_param_change,
            args=("q",),
            help="Adoption driven by word-of-mouth from existing adopters.",
        )
    with right:
        st.number_input(
            "Market potential (m)",
            min_value=M_LIMITS.min_value,
            step=M_LIMITS.step,
            format="%.0f",
            key=_WIDGET_KEYS["m"],
            on_change=_on_param_change,
            args=("m",),
            help="Total eventual number of adopters.",
        )
        st.number_input(
            "Time periods (years)",
            min_value=int(PERIOD_LIMITS.min_value),
            max_value=int(PERIOD_LIMITS.max_value),
            step=int(PERIOD_LIMITS.step),
            key=_WIDGET_KEYS["periods"],
            on_change=_on_param_change,
            args=("periods",),
            help="Forecast horizon counted from the first historical year.",
        )

    session = get_session()
    if session.last_error is not None:
        st.warning(f"Parameters not applied: {session.last_error}. Showing the last valid results.")


def _render_sidebar() -> None:
    session = get_session()
    report = session.series_report
    st.sidebar.header("Historical Data")
    st.sidebar.write(
        f"{report.summary['points']} annual points, {report.summary['first_year']}–{report.summary['last_year']}"
    )
    for issue in report.issues:
        st.sidebar.caption(f"{issue.level.upper()} `{issue.check}`: {issue.message}")
    st.sidebar.toggle("Show historical data", key="show_historical")
    st.sidebar.divider()

    st.sidebar.header("Run Controls")
    st.sidebar.write(f"Model evaluations this session: {session.evaluations}")
    if st.sidebar.button("Reset Parameters"):
        session.close()
        for k in list(st.session_state.keys()):
            del st.session_state[k]
        logger.info("Session reset to default parameters.")
        st.rerun()


def setup_page() -> None:
    """Call at the top of every page: init state, inject CSS, render sidebar."""
    _init_state()
    st.markdown(_CSS, unsafe_allow_html=True)
    _render_sidebar()
