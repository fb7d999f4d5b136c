from __future__ import annotations

import logging

import pytest

from bass_studio.core.exceptions import DomainConstraintViolation
from bass_studio.core.types import ObservationPoint
from bass_studio.services.bass import evaluate
from bass_studio.services.historical import HISTORICAL_SERIES
from bass_studio.services.session import BassSession


def test_session_evaluates_on_start():
    session = BassSession()
    assert len(session.model_points) == 11
    assert len(session.forecast_points) == 24
    assert session.evaluations == 1


def test_update_recomputes_before_returning():
    session = BassSession()
    session.update("q", 0.3)
    assert session.model_points == evaluate(session.params, HISTORICAL_SERIES)
    assert session.evaluations == 2


def test_periods_change_only_extends_projection():
    session = BassSession()
    before = session.model_points
    session.update("periods", 30)
    assert session.model_points == before
    assert session.forecast_points[-1].year == 2019


def test_rejected_parameters_keep_last_known_good():
    session = BassSession()
    good = session.model_points
    session.update("p", 0.0)
    assert session.model_points is good
    assert isinstance(session.last_error, DomainConstraintViolation)
    assert session.params.p == 0.0

    session.update("p", 0.01)
    assert session.last_error is None
    assert session.model_points != good


def test_invalid_series_is_refused():
    broken = (ObservationPoint(1990, 10, 10), ObservationPoint(1991, 10, 25))
    with pytest.raises(ValueError):
        BassSession(series=broken)


def test_close_stops_recomputing():
    session = BassSession()
    session.close()
    session.update("q", 0.1)
    assert session.evaluations == 1


def test_model_frame_columns():
    frame = BassSession().model_frame()
    assert list(frame.columns) == ["year", "sales", "cumulative", "predicted_sales", "predicted_cumulative"]
    assert frame["year"].tolist() == list(range(1990, 2001))


@pytest.mark.parametrize("periods", [float("nan"), float("inf"), -3])
def test_unusable_periods_do_not_block_model_updates(periods):
    session = BassSession()
    session.update("periods", periods)
    assert session.forecast_points == []
    assert session.last_error is None

    session.update("q", 0.3)
    assert session.model_points == evaluate(session.params, HISTORICAL_SERIES)
    assert session.evaluations == 3


def test_fractional_periods_are_truncated():
    session = BassSession()
    session.update("periods", 12.5)
    assert len(session.forecast_points) == 12


def test_non_positive_market_warns_once_per_recompute(caplog):
    session = BassSession()
    with caplog.at_level(logging.WARNING, logger="bass_studio"):
        session.update("m", -5.0)
    warnings = [r for r in caplog.records if "Market potential" in r.getMessage()]
    assert len(warnings) == 1
    assert session.last_error is None
