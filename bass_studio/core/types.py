from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from bass_studio.core.config import DEFAULT_PARAMETERS


@dataclass
class ParameterSet:
    p: float = DEFAULT_PARAMETERS.p
    q: float = DEFAULT_PARAMETERS.q
    m: float = DEFAULT_PARAMETERS.m
    periods: int = DEFAULT_PARAMETERS.periods


@dataclass(frozen=True)
class ObservationPoint:
    year: int
    sales: int
    cumulative: int


@dataclass(frozen=True)
class ModelPoint:
    year: int
    sales: int
    cumulative: int
    predicted_sales: float
    predicted_cumulative: float

    @classmethod
    def from_observation(
        cls, point: ObservationPoint, predicted_sales: float, predicted_cumulative: float
    ) -> ModelPoint:
        return cls(
            year=point.year,
            sales=point.sales,
            cumulative=point.cumulative,
            predicted_sales=predicted_sales,
            predicted_cumulative=predicted_cumulative,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ForecastPoint:
    year: int
    predicted_sales: float
    predicted_cumulative: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class KeyStatistics:
    peak_year: int
    peak_sales: int
    last_year: int
    total_adoption: int
    market_share: float
    word_of_mouth: float
    model_peak_time: float
    sales_cagr: float | None


@dataclass
class ValidationIssue:
    level: str
    check: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class SeriesReport:
    issues: list[ValidationIssue]
    summary: dict[str, Any]

    @property
    def has_errors(self) -> bool:
        return any(issue.level == "error" for issue in self.issues)
