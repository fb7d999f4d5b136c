from __future__ import annotations

from dataclasses import dataclass


BASE_YEAR = 1990
LOGGER_NAME = "bass_studio"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
PARAMETER_FIELDS = ("p", "q", "m", "periods")


@dataclass(frozen=True)
class ParameterDefaults:
    p: float = 0.0039
    q: float = 0.753
    m: float = 103_000_000.0
    periods: int = 24


@dataclass(frozen=True)
class WidgetLimits:
    min_value: float
    max_value: float | None
    step: float


DEFAULT_PARAMETERS = ParameterDefaults()

P_LIMITS = WidgetLimits(min_value=0.0, max_value=0.1, step=0.001)
Q_LIMITS = WidgetLimits(min_value=0.0, max_value=1.0, step=0.01)
M_LIMITS = WidgetLimits(min_value=0.0, max_value=None, step=1_000_000.0)
PERIOD_LIMITS = WidgetLimits(min_value=1, max_value=50, step=1)
