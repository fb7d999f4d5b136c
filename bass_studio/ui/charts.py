"""Plotly figure builders for the model comparison and forecast views."""
from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

ACTUAL_COLOR = "#8884d8"
PREDICTED_COLOR = "#82ca9d"
_LEGEND = dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)


def comparison_figure(
    model_df: pd.DataFrame,
    actual_col: str,
    predicted_col: str,
    title: str,
    show_actual: bool = True,
) -> go.Figure:
    """Actual vs predicted line chart against year."""
    label = "Cumulative" if "cumulative" in actual_col else "Sales"
    fig = go.Figure()
    if show_actual:
        fig.add_trace(
            go.Scatter(
                x=model_df["year"],
                y=model_df[actual_col],
                mode="lines+markers",
                name=f"Actual {label}",
                line=dict(color=ACTUAL_COLOR, width=2),
                marker=dict(size=8),
                hovertemplate="%{y:,.0f}<extra></extra>",
            )
        )
    fig.add_trace(
        go.Scatter(
            x=model_df["year"],
            y=model_df[predicted_col],
            mode="lines",
            name=f"Predicted {label}",
            line=dict(color=PREDICTED_COLOR, width=2, dash="dash"),
            hovertemplate="%{y:,.0f}<extra></extra>",
        )
    )
    fig.update_layout(
        title=title,
        xaxis_title="Year",
        yaxis_title="Units",
        template="plotly_white",
        yaxis=dict(tickformat=",.0f"),
        hovermode="x unified",
        legend=_LEGEND,
        margin=dict(t=60, b=20),
    )
    return fig


def forecast_figure(forecast_df: pd.DataFrame, model_df: pd.DataFrame, show_actual: bool = True) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=forecast_df["year"],
            y=forecast_df["predicted_sales"],
            name="Predicted annual sales",
            marker_color=PREDICTED_COLOR,
            opacity=0.7,
        )
    )
    fig.add_trace(
        go.Scatter(
            x=forecast_df["year"],
            y=forecast_df["predicted_cumulative"],
            mode="lines",
            name="Predicted cumulative",
            line=dict(color="#0ea5e9", width=2.5),
            yaxis="y2",
        )
    )
    if show_actual and not model_df.empty:
        fig.add_trace(
            go.Scatter(
                x=model_df["year"],
                y=model_df["sales"],
                mode="markers",
                name="Actual annual sales",
                marker=dict(color=ACTUAL_COLOR, size=8),
            )
        )
        fig.add_vline(
            x=int(model_df["year"].max()) + 0.5,
            line_dash="dash",
            line_color="#94a3b8",
            annotation_text="End of history",
            annotation_position="top right",
        )
    fig.update_layout(
        xaxis_title="Year",
        yaxis=dict(title="Annual units", tickformat=",.0f", rangemode="tozero"),
        yaxis2=dict(title="Cumulative units", tickformat=",.0f", overlaying="y", side="right", rangemode="tozero"),
        template="plotly_white",
        legend=_LEGEND,
        margin=dict(t=40, b=20),
    )
    return fig
