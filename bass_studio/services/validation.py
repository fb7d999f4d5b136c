from __future__ import annotations

from typing import Sequence

import numpy as np

from bass_studio.core.types import ObservationPoint, SeriesReport, ValidationIssue


def validate_series(series: Sequence[ObservationPoint]) -> SeriesReport:
    """Check the structural invariants of an annual observation series.

    Error-level issues make the series unusable for evaluation:
    ``empty``, ``year_order`` (years must strictly increase) and
    ``cumulative_mismatch`` (``cumulative`` must be the running sum of
    ``sales``). ``year_gaps`` and ``negative_sales`` are warnings.
    """
    issues: list[ValidationIssue] = []
    if not series:
        issues.append(ValidationIssue(level="error", check="empty", message="The observation series is empty."))
        return SeriesReport(issues=issues, summary={"points": 0})

    years = np.array([pt.year for pt in series], dtype=int)
    sales = np.array([pt.sales for pt in series], dtype=np.int64)
    cumulative = np.array([pt.cumulative for pt in series], dtype=np.int64)

    steps = np.diff(years)
    if (steps <= 0).any():
        issues.append(
            ValidationIssue(
                level="error",
                check="year_order",
                message="Years must be strictly increasing.",
                details={"bad_steps": int((steps <= 0).sum())},
            )
        )
    elif (steps != 1).any():
        issues.append(
            ValidationIssue(
                level="warning",
                check="year_gaps",
                message="Years are not contiguous; prior-period values are recomputed across gaps.",
                details={"missing_years": int((steps - 1).sum())},
            )
        )

    negatives = int((sales < 0).sum())
    if negatives:
        issues.append(
            ValidationIssue(
                level="warning",
                check="negative_sales",
                message="Negative annual sales values detected.",
                details={"negative_rows": negatives},
            )
        )

    mismatched = np.flatnonzero(np.cumsum(sales) != cumulative)
    if mismatched.size:
        issues.append(
            ValidationIssue(
                level="error",
                check="cumulative_mismatch",
                message="Cumulative values do not equal the running sum of sales.",
                details={"first_bad_year": int(years[mismatched[0]]), "bad_rows": int(mismatched.size)},
            )
        )

    summary = {
        "points": int(len(series)),
        "first_year": int(years[0]),
        "last_year": int(years[-1]),
        "total_sales": int(sales.sum()),
    }
    return SeriesReport(issues=issues, summary=summary)
