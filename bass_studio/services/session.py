from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from bass_studio.core.config import LOGGER_NAME
from bass_studio.core.exceptions import DomainConstraintViolation
from bass_studio.core.types import ForecastPoint, ModelPoint, ObservationPoint, ParameterSet
from bass_studio.services.bass import check_domain, evaluate, project
from bass_studio.services.historical import HISTORICAL_SERIES
from bass_studio.services.parameters import ParameterStore
from bass_studio.services.validation import validate_series

logger = logging.getLogger(LOGGER_NAME)


class BassSession:
    """One user's parameter store and the most recent evaluation of it.

    Every store update re-runs the evaluator before ``update`` returns. A
    rejected parameter set leaves the previous results in place and records
    the error in ``last_error``.
    """

    def __init__(
        self,
        series: Sequence[ObservationPoint] = HISTORICAL_SERIES,
        store: ParameterStore | None = None,
    ):
        report = validate_series(series)
        if report.has_errors:
            checks = ", ".join(i.check for i in report.issues if i.level == "error")
            raise ValueError(f"Historical series failed validation: {checks}")
        self.series = tuple(series)
        self.series_report = report
        self.store = store or ParameterStore()
        self.model_points: list[ModelPoint] = []
        self.forecast_points: list[ForecastPoint] = []
        self.last_error: DomainConstraintViolation | None = None
        self.evaluations = 0
        self._unsubscribe = self.store.subscribe(self.recompute)
        self.recompute(self.store.current)

    @property
    def params(self) -> ParameterSet:
        return self.store.current

    def update(self, field: str, value: float | int) -> None:
        self.store.update(field, value)

    def recompute(self, params: ParameterSet) -> None:
        try:
            check_domain(params)
        except DomainConstraintViolation as ex:
            logger.warning("Parameters rejected, keeping previous results: %s", ex)
            self.last_error = ex
            return
        self.model_points = evaluate(params, self.series, strict=False)
        self.forecast_points = project(params, self.series, strict=False)
        self.last_error = None
        self.evaluations += 1
        logger.info("Bass model evaluated for p=%s q=%s m=%s periods=%s", params.p, params.q, params.m, params.periods)

    def close(self) -> None:
        self._unsubscribe()

    def model_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [pt.to_dict() for pt in self.model_points],
            columns=["year", "sales", "cumulative", "predicted_sales", "predicted_cumulative"],
        )

    def forecast_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [pt.to_dict() for pt in self.forecast_points],
            columns=["year", "predicted_sales", "predicted_cumulative"],
        )
