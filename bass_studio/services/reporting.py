from __future__ import annotations

import io
import math
from dataclasses import asdict
from datetime import datetime, timezone

import pandas as pd

from bass_studio.core.types import KeyStatistics, ParameterSet


def format_number(value: float | int | None) -> str:
    """Round half up and group thousands, e.g. ``19464483.4 -> '19,464,483'``."""
    if value is None or not math.isfinite(value):
        return "n/a"
    return f"{math.floor(value + 0.5):,}"


def build_comparison_table(model_df: pd.DataFrame) -> pd.DataFrame:
    table = model_df.copy()
    table["sales_error"] = table["predicted_sales"] - table["sales"]
    table["cumulative_error"] = table["predicted_cumulative"] - table["cumulative"]
    return table[
        ["year", "sales", "predicted_sales", "sales_error", "cumulative", "predicted_cumulative", "cumulative_error"]
    ]


def build_summary(
    params: ParameterSet,
    stats: KeyStatistics,
    metrics: dict[str, float],
) -> pd.DataFrame:
    data = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        **{f"param_{k}": v for k, v in asdict(params).items()},
        "peak_year": stats.peak_year,
        "peak_sales": stats.peak_sales,
        "total_adoption": stats.total_adoption,
        "market_share": stats.market_share,
        "model_peak_time": stats.model_peak_time,
        "sales_cagr": stats.sales_cagr,
        **{f"fit_{k}": v for k, v in metrics.items()},
    }
    return pd.DataFrame([data])


def export_to_excel(
    comparison_table: pd.DataFrame,
    forecast_table: pd.DataFrame,
    summary_table: pd.DataFrame,
) -> bytes:
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="xlsxwriter") as writer:
        comparison_table.to_excel(writer, index=False, sheet_name="model")
        forecast_table.to_excel(writer, index=False, sheet_name="forecast")
        summary_table.to_excel(writer, index=False, sheet_name="summary")
    buffer.seek(0)
    return buffer.read()
