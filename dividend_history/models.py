"""Data structures shared by the fetch layer, the pipeline and the CLI."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class PipelineState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    SUCCESS = "success"
    NO_DATA = "no_data"
    FAILED = "failed"


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    NO_DIVIDEND_DATA = "no_dividend_data"
    NO_RECENT_DIVIDEND_DATA = "no_recent_dividend_data"
    UNKNOWN_FAILURE = "unknown_failure"


@dataclass(frozen=True)
class DividendRecord:
    date: dt.date
    adj_dividend: float
    dividend: Optional[float] = None
    record_date: Optional[dt.date] = None
    payment_date: Optional[dt.date] = None
    declaration_date: Optional[dt.date] = None


@dataclass(frozen=True)
class SplitRecord:
    date: dt.date
    numerator: int
    denominator: int

    @property
    def ratio(self) -> str:
        return f"{self.numerator}:{self.denominator}"


@dataclass(frozen=True)
class ChartSeries:
    """Plot-ready dividend series, oldest point first."""

    labels: Tuple[str, ...]
    values: Tuple[float, ...]
    y_axis_min: float
    y_axis_max: float


@dataclass(frozen=True)
class DividendView:
    """Everything the UI shows for one fetch cycle.

    Build it through the classmethods below so each state only ever carries
    the fields that belong to it.
    """

    state: PipelineState
    symbol: str = ""
    company_name: Optional[str] = None
    records: Tuple[DividendRecord, ...] = ()
    chart: Optional[ChartSeries] = None
    growth_figures: Tuple[Tuple[int, Optional[float]], ...] = ()
    splits: Optional[Tuple[SplitRecord, ...]] = None
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.state is PipelineState.FETCHING

    @property
    def has_data(self) -> bool:
        return self.state is PipelineState.SUCCESS

    @property
    def growth(self) -> Dict[int, Optional[float]]:
        """Growth figure per horizon in years; None means not available."""
        return dict(self.growth_figures)

    @classmethod
    def idle(cls) -> "DividendView":
        return cls(state=PipelineState.IDLE)

    @classmethod
    def fetching(cls, symbol: str) -> "DividendView":
        return cls(state=PipelineState.FETCHING, symbol=symbol)

    @classmethod
    def success(
        cls,
        symbol: str,
        records: Tuple[DividendRecord, ...],
        chart: ChartSeries,
        growth: Dict[int, Optional[float]],
        company_name: Optional[str] = None,
        splits: Optional[Tuple[SplitRecord, ...]] = None,
    ) -> "DividendView":
        return cls(
            state=PipelineState.SUCCESS,
            symbol=symbol,
            company_name=company_name,
            records=records,
            chart=chart,
            growth_figures=tuple(growth.items()),
            splits=splits or None,
        )

    @classmethod
    def no_data(cls, symbol: str, kind: ErrorKind, message: str) -> "DividendView":
        return cls(state=PipelineState.NO_DATA, symbol=symbol, error_kind=kind, error=message)

    @classmethod
    def failed(cls, symbol: str, kind: ErrorKind, message: str) -> "DividendView":
        return cls(state=PipelineState.FAILED, symbol=symbol, error_kind=kind, error=message)

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "symbol": self.symbol,
            "company_name": self.company_name,
            "has_data": self.has_data,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "error": self.error,
            "records": [
                {
                    "date": r.date.isoformat(),
                    "adj_dividend": r.adj_dividend,
                    "dividend": r.dividend,
                    "record_date": _isoformat(r.record_date),
                    "payment_date": _isoformat(r.payment_date),
                    "declaration_date": _isoformat(r.declaration_date),
                }
                for r in self.records
            ],
            "growth": {str(years): value for years, value in self.growth.items()},
            "chart": None if self.chart is None else {
                "labels": list(self.chart.labels),
                "values": list(self.chart.values),
                "y_axis_min": self.chart.y_axis_min,
                "y_axis_max": self.chart.y_axis_max,
            },
            "splits": None if self.splits is None else [
                {"date": s.date.isoformat(), "ratio": s.ratio} for s in self.splits
            ],
        }


def _isoformat(value: Optional[dt.date]) -> Optional[str]:
    return None if value is None else value.isoformat()
