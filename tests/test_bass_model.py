from __future__ import annotations

import math

import numpy as np
import pytest

from bass_studio.core.exceptions import DomainConstraintViolation
from bass_studio.core.types import ParameterSet
from bass_studio.services.bass import cumulative_adoption, evaluate, peak_time, project
from bass_studio.services.historical import HISTORICAL_SERIES, build_series


def _params(**overrides) -> ParameterSet:
    return ParameterSet(**{"p": 0.0039, "q": 0.753, "m": 103_000_000.0, "periods": 24, **overrides})


def test_evaluate_is_deterministic():
    first = evaluate(_params(), HISTORICAL_SERIES)
    second = evaluate(_params(), HISTORICAL_SERIES)
    assert first == second


def test_one_point_per_observation_with_fields_preserved():
    points = evaluate(_params(), HISTORICAL_SERIES)
    assert len(points) == len(HISTORICAL_SERIES)
    for obs, point in zip(HISTORICAL_SERIES, points):
        assert (point.year, point.sales, point.cumulative) == (obs.year, obs.sales, obs.cumulative)


def test_first_point_is_zero_and_identical():
    first = evaluate(_params(), HISTORICAL_SERIES)[0]
    assert first.year == 1990
    assert first.predicted_sales == first.predicted_cumulative
    assert first.predicted_cumulative == 0.0


def test_sales_are_differences_of_cumulative():
    points = evaluate(_params(), HISTORICAL_SERIES)
    assert points[1].predicted_cumulative - points[0].predicted_cumulative == points[1].predicted_sales
    for prev, cur in zip(points, points[1:]):
        assert cur.predicted_cumulative - prev.predicted_cumulative == cur.predicted_sales


def test_matches_closed_form():
    p, q, m = 0.0039, 0.753, 103_000_000.0
    points = evaluate(_params(), HISTORICAL_SERIES)
    for t, point in enumerate(points):
        e = math.exp(-(p + q) * t)
        expected = m * (1 - e) / (1 + (q / p) * e)
        assert point.predicted_cumulative == pytest.approx(expected, rel=1e-12)


def test_cumulative_is_monotonic():
    for q in (0.0, 0.2, 0.753, 0.99):
        points = evaluate(_params(q=q), HISTORICAL_SERIES)
        values = [pt.predicted_cumulative for pt in points]
        assert all(a <= b for a, b in zip(values, values[1:]))


def test_zero_imitation_reduces_to_pure_innovation():
    p, m = 0.05, 1_000_000.0
    points = evaluate(_params(p=p, q=0.0, m=m), HISTORICAL_SERIES)
    for t, point in enumerate(points):
        assert point.predicted_cumulative == pytest.approx(m * (1 - math.exp(-p * t)), rel=1e-12)


def test_cumulative_approaches_market_potential():
    m = 103_000_000.0
    late = cumulative_adoption(np.array([200.0, 500.0]), 0.0039, 0.753, m)
    assert late == pytest.approx([m, m], rel=1e-9)


def test_changing_q_only_moves_later_points():
    base = evaluate(_params(), HISTORICAL_SERIES)
    changed = evaluate(_params(q=0.4), HISTORICAL_SERIES)
    assert changed[0].predicted_sales == base[0].predicted_sales == 0.0
    assert changed[0].predicted_cumulative == base[0].predicted_cumulative == 0.0
    assert all(a.predicted_cumulative != b.predicted_cumulative for a, b in zip(base[1:], changed[1:]))


def test_inputs_are_not_mutated():
    params = _params()
    series = list(HISTORICAL_SERIES)
    evaluate(params, series)
    assert params == _params()
    assert tuple(series) == HISTORICAL_SERIES


def test_empty_series():
    assert evaluate(_params(), []) == []


@pytest.mark.parametrize("field,value", [("p", 0.0), ("p", -0.01), ("q", float("nan")), ("m", float("inf"))])
def test_strict_mode_rejects_invalid_domain(field, value):
    with pytest.raises(DomainConstraintViolation) as info:
        evaluate(_params(**{field: value}), HISTORICAL_SERIES)
    assert info.value.field == field


def test_lenient_mode_propagates_non_finite_values():
    points = evaluate(_params(p=0.0, q=0.0), HISTORICAL_SERIES, strict=False)
    assert len(points) == len(HISTORICAL_SERIES)
    assert all(math.isnan(pt.predicted_cumulative) for pt in points)

    points = evaluate(_params(p=float("nan")), HISTORICAL_SERIES, strict=False)
    assert all(math.isnan(pt.predicted_sales) for pt in points)


def test_non_positive_market_is_passed_through():
    points = evaluate(_params(m=-1000.0), HISTORICAL_SERIES)
    assert points[0].predicted_cumulative == 0.0
    assert all(pt.predicted_cumulative < 0 for pt in points[1:])


def test_gaps_recompute_prior_period():
    series = build_series([2000, 2001, 2004], [10, 20, 30])
    params = _params()
    points = evaluate(params, series)
    c3, c4 = cumulative_adoption(np.array([3.0, 4.0]), params.p, params.q, params.m)
    assert points[2].predicted_sales == pytest.approx(c4 - c3, rel=1e-12)
    assert points[2].predicted_cumulative == pytest.approx(c4, rel=1e-12)


def test_projection_covers_periods_and_agrees_with_history():
    params = _params(periods=24)
    forecast = project(params, HISTORICAL_SERIES)
    assert [pt.year for pt in forecast] == list(range(1990, 2014))
    for model_pt, forecast_pt in zip(evaluate(params, HISTORICAL_SERIES), forecast):
        assert forecast_pt.predicted_cumulative == pytest.approx(model_pt.predicted_cumulative, rel=1e-12)
        assert forecast_pt.predicted_sales == pytest.approx(model_pt.predicted_sales, rel=1e-9, abs=1e-6)


def test_projection_shorter_than_history_and_empty():
    assert len(project(_params(periods=5), HISTORICAL_SERIES)) == 5
    assert project(_params(periods=0), HISTORICAL_SERIES) == []
    assert project(_params(), []) == []


def test_peak_time():
    assert peak_time(0.0039, 0.753) == pytest.approx(math.log(0.753 / 0.0039) / 0.7569)
    assert peak_time(0.05, 0.0) == 0.0
    assert peak_time(0.0, 0.5) == float("inf")


@pytest.mark.parametrize("periods,expected", [(float("nan"), 0), (float("inf"), 0), (2.5, 2)])
def test_projection_with_unusual_periods(periods, expected):
    assert len(project(_params(periods=periods), HISTORICAL_SERIES)) == expected
