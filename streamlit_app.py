from __future__ import annotations

import logging

import streamlit as st

from bass_studio.core.config import LOG_FORMAT, LOGGER_NAME

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(LOGGER_NAME)

st.set_page_config(page_title="Bass Diffusion Studio", layout="wide")

from bass_studio.services.reporting import build_comparison_table, format_number  # noqa: E402
from bass_studio.services.statistics import fit_metrics, key_statistics  # noqa: E402
from bass_studio.ui.charts import comparison_figure  # noqa: E402
from bass_studio.ui.shared import get_session, render_parameter_controls, setup_page  # noqa: E402

setup_page()

st.title("Bass Diffusion Model Analysis")
st.caption(
    "Tune the innovation (p) and imitation (q) coefficients and the market potential (m); "
    "predicted annual and cumulative sales are recomputed on every change."
)

render_parameter_controls()

session = get_session()
params = session.params
model_df = session.model_frame()
show_historical = st.session_state.show_historical

# --- Key statistics ---
stats = key_statistics(session.series, params)
c1, c2, c3 = st.columns(3)
c1.metric("Peak Year", stats.peak_year, f"{format_number(stats.peak_sales)} units", delta_color="off")
c2.metric(
    f"Total Adoption by {stats.last_year}",
    format_number(stats.total_adoption),
    f"{stats.market_share:.1%} of market potential",
    delta_color="off",
)
c3.metric("Growth Factors", f"{stats.word_of_mouth:.1%}", "word-of-mouth effect", delta_color="off")

if model_df.empty:
    st.info("Set a strictly positive innovation coefficient (p) to evaluate the model.")
    st.stop()

# --- Charts ---
st.subheader("Annual Sales Comparison")
st.plotly_chart(
    comparison_figure(model_df, "sales", "predicted_sales", "Actual vs Predicted Annual Sales", show_historical),
    use_container_width=True,
)

st.subheader("Cumulative Sales Comparison")
st.plotly_chart(
    comparison_figure(
        model_df, "cumulative", "predicted_cumulative", "Actual vs Predicted Cumulative Sales", show_historical
    ),
    use_container_width=True,
)

# --- Fit diagnostics ---
st.subheader("Fit Diagnostics")
metrics = fit_metrics(session.model_points)
m1, m2, m3, m4 = st.columns(4)
m1.metric("RMSE", format_number(metrics["rmse"]))
m2.metric("MAPE", f"{metrics['mape']:.1f}%")
m3.metric("sMAPE", f"{metrics['smape']:.1f}%")
m4.metric("R²", f"{metrics['r2']:.3f}")
st.caption(
    f"Model peak at t = {stats.model_peak_time:.2f} years after {session.series[0].year}. "
    "Diagnostics compare predicted with actual annual sales; parameters are set by hand, not estimated."
)

with st.expander("Model table"):
    st.dataframe(build_comparison_table(model_df), use_container_width=True, hide_index=True)
