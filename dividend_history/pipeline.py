"""One fetch-and-derive cycle for a single ticker symbol.

``DividendPipeline.run`` walks IDLE -> FETCHING -> SUCCESS / NO_DATA / FAILED
and replaces ``view`` with a fresh ``DividendView`` at every transition.
"""

from __future__ import annotations

import datetime as dt
import logging
import threading
from typing import Any, Callable, Optional

from . import config
from . import fetch
from . import messages
from . import utils
from .errors import (
    DividendHistoryError,
    InvalidInputError,
    NoDividendDataError,
    NoRecentDividendDataError,
)
from .models import DividendView, ErrorKind

logger = logging.getLogger(__name__)


class DividendPipeline:
    """Fetch dividend and split history for a symbol and build its view."""

    def __init__(
        self,
        lang: str = config.DEFAULT_LANGUAGE,
        api_key: Optional[str] = None,
        now: Callable[[], dt.datetime] = dt.datetime.now,
    ) -> None:
        self.lang = lang
        self.api_key = api_key
        self._now = now
        self._lock = threading.Lock()
        self.view = DividendView.idle()

    def run(self, symbol: Optional[str]) -> DividendView:
        """Run one cycle for ``symbol`` and return the resulting view.

        A call made while another cycle is in flight is ignored and returns
        the current view.
        """
        if not self._lock.acquire(blocking=False):
            logger.warning("Ignoring lookup for %s: a cycle is already running", symbol)
            return self.view
        try:
            self.view = self._cycle((symbol or "").strip().upper())
        finally:
            self._lock.release()
        return self.view

    def _cycle(self, symbol: str) -> DividendView:
        if not symbol:
            return self._failed(symbol, InvalidInputError("empty symbol"))

        self.view = DividendView.fetching(symbol)
        try:
            return self._fetch_and_build(symbol)
        except (NoDividendDataError, NoRecentDividendDataError) as e:
            logger.info("%s: %s", symbol, e)
            return DividendView.no_data(symbol, e.kind, messages.error_message(e.kind, self.lang))
        except DividendHistoryError as e:
            return self._failed(symbol, e)
        except Exception as e:
            logger.exception("Unexpected error while processing %s", symbol)
            return self._failed(symbol, e)

    def _fetch_and_build(self, symbol: str) -> DividendView:
        records = fetch.fetch_dividends(symbol, api_key=self.api_key)
        if records is None or len(records) == 0:
            raise NoDividendDataError(f"no dividend history for {symbol}")

        recent = utils.window_records(records, reference=self._now())
        if len(recent) == 0:
            raise NoRecentDividendDataError(
                f"no dividends for {symbol} in the last {config.WINDOW_YEARS} years"
            )

        company_name = self._best_effort(
            "profile", lambda: fetch.fetch_company_name(symbol, api_key=self.api_key)
        )
        growth = utils.growth_table(recent)
        chart = utils.build_chart_series(
            tuple(reversed(recent)),
            label=lambda date: messages.format_chart_label(date, self.lang),
        )
        splits = self._best_effort(
            "split_calendar",
            lambda: utils.sort_splits(fetch.fetch_splits(symbol, api_key=self.api_key)),
        )

        return DividendView.success(
            symbol,
            records=recent,
            chart=chart,
            growth=growth,
            company_name=company_name,
            splits=splits,
        )

    def _best_effort(self, stage: str, supplier: Callable[[], Any]) -> Any:
        """Run an optional lookup; a failure only drops that section."""
        try:
            return supplier()
        except Exception as e:
            logger.warning("%s: %s lookup degraded: %s", self.view.symbol, stage, e)
            return None

    def _failed(self, symbol: str, exc: Exception) -> DividendView:
        kind = getattr(exc, "kind", ErrorKind.UNKNOWN_FAILURE)
        logger.error("%s: lookup failed (%s): %s", symbol or "<blank>", kind.value, exc)
        detail = "" if kind is ErrorKind.INVALID_INPUT else str(exc)
        return DividendView.failed(symbol, kind, messages.error_message(kind, self.lang, detail))
