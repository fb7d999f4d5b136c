from __future__ import annotations

from typing import Sequence

import numpy as np
from sklearn.metrics import mean_absolute_percentage_error, r2_score

from bass_studio.core.types import KeyStatistics, ModelPoint, ObservationPoint, ParameterSet
from bass_studio.services.bass import peak_time


def cagr(values: Sequence[float], years: float) -> float | None:
    if years <= 0 or len(values) < 2:
        return None
    start, end = float(values[0]), float(values[-1])
    if start <= 0 or end <= 0:
        return None
    return (end / start) ** (1 / years) - 1


def key_statistics(series: Sequence[ObservationPoint], params: ParameterSet) -> KeyStatistics:
    """Headline figures for the historical series under the current parameters."""
    if not series:
        raise ValueError("Key statistics need at least one observation.")
    peak = max(series, key=lambda pt: pt.sales)
    last = series[-1]
    share = last.cumulative / params.m if params.m else float("nan")
    return KeyStatistics(
        peak_year=peak.year,
        peak_sales=peak.sales,
        last_year=last.year,
        total_adoption=last.cumulative,
        market_share=float(share),
        word_of_mouth=float(params.q),
        model_peak_time=peak_time(params.p, params.q),
        sales_cagr=cagr([pt.sales for pt in series], last.year - series[0].year),
    )


def smape(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    denom = (np.abs(y_true) + np.abs(y_pred)) / 2
    denom = np.where(denom == 0, 1e-9, denom)
    return float(np.mean(np.abs(y_true - y_pred) / denom) * 100)


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    return float(np.sqrt(np.mean((y_true - y_pred) ** 2)))


def fit_metrics(points: Sequence[ModelPoint]) -> dict[str, float]:
    """Goodness of fit of predicted vs actual annual sales. Diagnostic only."""
    if not points:
        return {}
    y_true = np.array([pt.sales for pt in points], dtype=float)
    y_pred = np.array([pt.predicted_sales for pt in points], dtype=float)
    if not np.isfinite(y_pred).all():
        nan = float("nan")
        return {"rmse": nan, "mape": nan, "smape": nan, "r2": nan}
    return {
        "rmse": rmse(y_true, y_pred),
        "mape": float(mean_absolute_percentage_error(y_true, y_pred) * 100),
        "smape": smape(y_true, y_pred),
        "r2": float(r2_score(y_true, y_pred)) if len(points) > 1 else float("nan"),
    }
