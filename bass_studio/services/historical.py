from __future__ import annotations

from typing import Sequence

from bass_studio.core.types import ObservationPoint


HISTORICAL_SERIES: tuple[ObservationPoint, ...] = (
    ObservationPoint(year=1990, sales=401_700, cumulative=401_700),
    ObservationPoint(year=1991, sales=701_434, cumulative=1_103_134),
    ObservationPoint(year=1992, sales=1_219_161, cumulative=2_322_295),
    ObservationPoint(year=1993, sales=2_191_594, cumulative=4_513_889),
    ObservationPoint(year=1994, sales=3_757_772, cumulative=8_271_661),
    ObservationPoint(year=1995, sales=5_924_702, cumulative=14_196_363),
    ObservationPoint(year=1996, sales=9_413_320, cumulative=23_609_683),
    ObservationPoint(year=1997, sales=13_551_200, cumulative=37_160_883),
    ObservationPoint(year=1998, sales=18_158_887, cumulative=55_319_770),
    ObservationPoint(year=1999, sales=19_464_483, cumulative=74_784_253),
    ObservationPoint(year=2000, sales=15_310_223, cumulative=90_094_476),
)


def build_series(years: Sequence[int], sales: Sequence[int]) -> tuple[ObservationPoint, ...]:
    """Pair years with annual sales and fill in the running cumulative total."""
    if len(years) != len(sales):
        raise ValueError("years and sales must have the same length.")
    points = []
    running = 0
    for year, value in zip(years, sales):
        running += int(value)
        points.append(ObservationPoint(year=int(year), sales=int(value), cumulative=running))
    return tuple(points)
