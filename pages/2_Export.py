"""Page 2 - Export: download the model comparison and forecast."""
from __future__ import annotations

import streamlit as st

st.set_page_config(page_title="Export | Bass Diffusion Studio", layout="wide")

from bass_studio.ui.shared import get_session, setup_page  # noqa: E402

setup_page()

from bass_studio.services.reporting import build_comparison_table, build_summary, export_to_excel  # noqa: E402
from bass_studio.services.statistics import fit_metrics, key_statistics  # noqa: E402

st.header("Export & Reporting")

session = get_session()
model_df = session.model_frame()

if model_df.empty:
    st.info("Evaluate the model with valid parameters first.")
    st.stop()

comparison = build_comparison_table(model_df)
forecast_table = session.forecast_frame()
summary = build_summary(
    session.params,
    key_statistics(session.series, session.params),
    fit_metrics(session.model_points),
)

st.dataframe(comparison, use_container_width=True, hide_index=True)
st.dataframe(summary, use_container_width=True, hide_index=True)

st.download_button(
    "Download Excel Report",
    data=export_to_excel(comparison, forecast_table, summary),
    file_name="bass_model_report.xlsx",
    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)
st.download_button(
    "Download Model CSV",
    data=comparison.to_csv(index=False).encode("utf-8"),
    file_name="bass_model.csv",
    mime="text/csv",
)
st.download_button(
    "Download Forecast CSV",
    data=forecast_table.to_csv(index=False).encode("utf-8"),
    file_name="bass_forecast.csv",
    mime="text/csv",
)
