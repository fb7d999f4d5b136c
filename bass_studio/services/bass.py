"""Bass diffusion model: closed-form cumulative adoption and its evaluation
over an annual observation series.

``evaluate`` is a pure function of ``(ParameterSet, series)``. It never
mutates its inputs and returns one ``ModelPoint`` per observation, in order.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from bass_studio.core.config import LOGGER_NAME
from bass_studio.core.exceptions import DomainConstraintViolation
from bass_studio.core.types import ForecastPoint, ModelPoint, ObservationPoint, ParameterSet

logger = logging.getLogger(LOGGER_NAME)


def cumulative_fraction(t: np.ndarray, p: float, q: float) -> np.ndarray:
    """Installed-base fraction F(t). Values lie in [0, 1) for p > 0, q >= 0, t >= 0."""
    t = np.asarray(t, dtype=float)
    p, q = np.float64(p), np.float64(q)
    exp_term = np.exp(-(p + q) * t)
    return (1.0 - exp_term) / (1.0 + (q / p) * exp_term)


def cumulative_adoption(t: np.ndarray, p: float, q: float, m: float) -> np.ndarray:
    return np.float64(m) * cumulative_fraction(t, p, q)


def check_domain(params: ParameterSet) -> None:
    """Raise ``DomainConstraintViolation`` when the closed form is undefined."""
    for name in ("p", "q", "m"):
        value = getattr(params, name)
        if not math.isfinite(value):
            raise DomainConstraintViolation(name, value, "must be a finite number")
    if params.p <= 0:
        raise DomainConstraintViolation("p", params.p, "innovation coefficient must be strictly positive")
    if params.m <= 0:
        logger.warning("Market potential m=%s is not positive; predicted adoption will be non-positive.", params.m)


def _prior_cumulative(elapsed: np.ndarray, current: np.ndarray, params: ParameterSet) -> np.ndarray:
    # C(-1) is 0; contiguous points reuse the previous C(t).
    prior = np.zeros_like(current)
    for i, t in enumerate(elapsed):
        if t == 0:
            continue
        if i > 0 and elapsed[i - 1] == t - 1:
            prior[i] = current[i - 1]
        else:
            prior[i] = cumulative_adoption(np.array([t - 1]), params.p, params.q, params.m)[0]
    return prior


def evaluate(
    params: ParameterSet,
    series: Sequence[ObservationPoint],
    strict: bool = True,
) -> list[ModelPoint]:
    """Annotate every observation with predicted annual and cumulative adoption.

    Parameters
    ----------
    strict:
        When ``True`` (default) parameters outside the model domain raise
        ``DomainConstraintViolation``. When ``False`` they propagate as
        non-finite or meaningless numbers without any exception.
    """
    if strict:
        check_domain(params)
    if not series:
        return []

    start = series[0].year
    elapsed = np.array([pt.year - start for pt in series], dtype=float)
    with np.errstate(all="ignore"):
        current = cumulative_adoption(elapsed, params.p, params.q, params.m)
        prior = _prior_cumulative(elapsed, current, params)
        predicted_sales = current - prior

    return [
        ModelPoint.from_observation(pt, float(sales), float(cum))
        for pt, sales, cum in zip(series, predicted_sales, current)
    ]


def project(
    params: ParameterSet,
    series: Sequence[ObservationPoint],
    strict: bool = True,
) -> list[ForecastPoint]:
    """Model values for ``params.periods`` years starting at the first observed year.

    Fractional ``periods`` are truncated; a non-finite or non-positive
    ``periods`` yields an empty projection.
    """
    if strict:
        check_domain(params)
    if not series or not math.isfinite(params.periods):
        return []
    periods = int(params.periods)
    if periods < 1:
        return []

    start = series[0].year
    elapsed = np.arange(periods, dtype=float)
    with np.errstate(all="ignore"):
        current = cumulative_adoption(elapsed, params.p, params.q, params.m)
        prior = np.concatenate(([0.0], current[:-1]))
        predicted_sales = current - prior

    return [
        ForecastPoint(year=start + i, predicted_sales=float(predicted_sales[i]), predicted_cumulative=float(current[i]))
        for i in range(periods)
    ]


def peak_time(p: float, q: float) -> float:
    """Elapsed time at which annual adoption peaks, ln(q/p) / (p + q)."""
    if not (math.isfinite(p) and math.isfinite(q)) or p <= 0 or p + q <= 0:
        return float("inf")
    if q <= p:
        return 0.0
    return math.log(q / p) / (p + q)
