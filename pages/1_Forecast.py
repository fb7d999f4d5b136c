"""Page 1 - Forecast: project the current model over the chosen number of periods."""
from __future__ import annotations

import streamlit as st

st.set_page_config(page_title="Forecast | Bass Diffusion Studio", layout="wide")

from bass_studio.ui.shared import get_session, setup_page  # noqa: E402

setup_page()

from bass_studio.services.reporting import format_number  # noqa: E402
from bass_studio.ui.charts import forecast_figure  # noqa: E402

st.header("Forecast Horizon")

session = get_session()
params = session.params
forecast_df = session.forecast_frame()

st.caption(
    f"Projection over {params.periods} years from {session.series[0].year}, "
    f"using p={params.p:.4f}, q={params.q:.3f}, m={format_number(params.m)}. "
    "Change the parameters on the main page."
)

if session.last_error is not None:
    st.warning(f"Parameters not applied: {session.last_error}. Showing the last valid projection.")

if forecast_df.empty:
    st.info("No projection available for the current parameters.")
    st.stop()

st.plotly_chart(
    forecast_figure(forecast_df, session.model_frame(), st.session_state.show_historical),
    use_container_width=True,
)

last = forecast_df.iloc[-1]
c1, c2 = st.columns(2)
c1.metric(f"Cumulative adoption by {int(last['year'])}", format_number(last["predicted_cumulative"]))
c2.metric("Share of market potential", f"{last['predicted_cumulative'] / params.m:.1%}" if params.m else "n/a")

display = forecast_df.copy()
display["predicted_sales"] = display["predicted_sales"].map(format_number)
display["predicted_cumulative"] = display["predicted_cumulative"].map(format_number)
st.dataframe(display, use_container_width=True, hide_index=True)
