"""Derivation helpers for dividend history.

Provides:
* window_records – keep the trailing N years of records, newest first.
* cagr – compound annual growth rate between two values.
* dividend_growth / growth_table – growth figures over fixed horizons.
* build_chart_series – plot-ready values with padded y-axis bounds.
* sort_splits – order split events newest first.
"""

import datetime as dt
from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple, Union

import pandas as pd

from .config import GROWTH_HORIZONS, WINDOW_YEARS
from .models import ChartSeries, DividendRecord, SplitRecord

TOP_PADDING = 0.2
BOTTOM_PADDING = 0.4


def window_records(
    records: Iterable[DividendRecord],
    reference: Optional[Union[dt.datetime, dt.date]] = None,
    years: int = WINDOW_YEARS,
) -> Tuple[DividendRecord, ...]:
    """Return records dated on or after ``reference - years``, newest first.

    A record counts from midnight of its date, so one dated on the boundary
    day drops out once ``reference`` is past midnight. Records sharing a date
    keep their input order.
    """
    if reference is None:
        reference = dt.datetime.now()
    cutoff = pd.Timestamp(reference) - pd.DateOffset(years=years)
    if cutoff.tzinfo is not None:
        cutoff = cutoff.tz_localize(None)
    recent = [r for r in records if pd.Timestamp(r.date) >= cutoff]
    return tuple(sorted(recent, key=lambda r: r.date, reverse=True))


def cagr(first: float, last: float, years: int) -> float:
    """Calculate compound annual growth rate.

    ``first`` and ``last`` are the oldest and newest values, ``years`` is the
    number of years between them.
    """
    if years <= 0 or first <= 0:
        return 0.0
    return ((last / first) ** (1.0 / years) - 1.0) * 100.0


def dividend_growth(records: Sequence[DividendRecord], years: int) -> Optional[float]:
    """Growth of the latest dividend over ``years``, in percent, or None.

    ``records`` must be newest first. The comparison point is the record
    ``years - 1`` steps back (capped at the oldest one) while the exponent
    always uses ``years``, so short histories give an approximate rate.
    """
    if len(records) < years:
        return None
    latest = records[0].adj_dividend
    oldest = records[min(years - 1, len(records) - 1)].adj_dividend
    if oldest == 0:
        return None
    return round(cagr(oldest, latest, years), 2)


def growth_table(
    records: Sequence[DividendRecord],
    horizons: Sequence[int] = GROWTH_HORIZONS,
) -> Dict[int, Optional[float]]:
    return {years: dividend_growth(records, years) for years in horizons}


def format_growth(value: Optional[float]) -> str:
    return f"{value:.2f}%" if value is not None else "N/A"


def build_chart_series(
    records: Sequence[DividendRecord],
    label: Callable[[dt.date], str] = dt.date.isoformat,
) -> ChartSeries:
    """Turn ascending, non-empty records into a chart series.

    The y-axis gets 20% of the value range as headroom and 40% below the
    minimum, never dropping under zero. Identical values give a flat axis
    where both bounds equal that value.
    """
    values = tuple(float(r.adj_dividend) for r in records)
    max_value = max(values)
    min_value = min(values)
    value_range = max_value - min_value

    return ChartSeries(
        labels=tuple(label(r.date) for r in records),
        values=values,
        y_axis_min=max(0.0, min_value - value_range * BOTTOM_PADDING),
        y_axis_max=max_value + value_range * TOP_PADDING,
    )


def sort_splits(splits: Optional[Iterable[SplitRecord]]) -> Tuple[SplitRecord, ...]:
    if splits is None:
        return ()
    return tuple(sorted(splits, key=lambda s: s.date, reverse=True))
