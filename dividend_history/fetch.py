"""Data fetching utilities for dividend_history.

Talks to the Financial Modeling Prep REST API with plain ``requests`` calls.
Parsers return ``None`` when the expected field is absent, an empty list when
it is present but empty, and the parsed records otherwise.
"""

import datetime as dt
import logging
from typing import Any, List, Optional

import requests

from . import config
from .errors import ProviderUnavailableError
from .models import DividendRecord, SplitRecord

logger = logging.getLogger(__name__)

DIVIDEND_URL = "{base}/historical-price-full/stock_dividend/{symbol}"
PROFILE_URL = "{base}/profile/{symbol}"
SPLIT_CALENDAR_URL = "{base}/stock_split_calendar/{symbol}"

HEADERS = {"User-Agent": "dividend-history/1.0.0", "Accept": "application/json"}


def _get_json(url: str, params: dict, api_key: Optional[str] = None) -> Any:
    """GET ``url`` and decode the JSON body, mapping transport failures."""
    params = dict(params, apikey=api_key or config.get_api_key())
    try:
        response = requests.get(url, params=params, headers=HEADERS, timeout=config.FMP_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        raise ProviderUnavailableError(str(e)) from e
    return response.json()


def _parse_date(value: Any) -> Optional[dt.date]:
    if not value:
        return None
    try:
        return dt.date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def parse_dividends(payload: Any) -> Optional[List[DividendRecord]]:
    """Extract dividend records from a ``stock_dividend`` payload."""
    if not isinstance(payload, dict):
        return None
    historical = payload.get("historical")
    if historical is None:
        return None

    records = []
    for item in historical:
        date = _parse_date(item.get("date"))
        amount = item.get("adjDividend")
        if date is None or amount is None:
            continue
        records.append(
            DividendRecord(
                date=date,
                adj_dividend=float(amount),
                dividend=_optional_float(item.get("dividend")),
                record_date=_parse_date(item.get("recordDate")),
                payment_date=_parse_date(item.get("paymentDate")),
                declaration_date=_parse_date(item.get("declarationDate")),
            )
        )
    return records


def parse_company_name(payload: Any) -> Optional[str]:
    if not isinstance(payload, list) or len(payload) == 0:
        return None
    name = payload[0].get("companyName")
    return name or None


def parse_splits(payload: Any, symbol: Optional[str] = None) -> Optional[List[SplitRecord]]:
    """Extract split events; entries tagged with another symbol are dropped."""
    if not isinstance(payload, list):
        return None

    splits = []
    for item in payload:
        other = item.get("symbol")
        if symbol and other and other.upper() != symbol.upper():
            continue
        date = _parse_date(item.get("date"))
        numerator = item.get("numerator")
        denominator = item.get("denominator")
        if date and numerator and denominator:
            splits.append(SplitRecord(date=date, numerator=int(numerator), denominator=int(denominator)))
    return splits


def fetch_dividends(symbol: str, api_key: Optional[str] = None) -> Optional[List[DividendRecord]]:
    """Fetch the full dividend history for ``symbol``."""
    url = DIVIDEND_URL.format(base=config.FMP_BASE_URL, symbol=symbol)
    payload = _get_json(url, {}, api_key)
    records = parse_dividends(payload)
    logger.debug("%s: %s dividend records", symbol, "no" if records is None else len(records))
    return records


def fetch_company_name(symbol: str, api_key: Optional[str] = None) -> Optional[str]:
    url = PROFILE_URL.format(base=config.FMP_BASE_URL, symbol=symbol)
    return parse_company_name(_get_json(url, {}, api_key))


def fetch_splits(symbol: str, api_key: Optional[str] = None,
                 start: str = config.SPLIT_CALENDAR_START) -> Optional[List[SplitRecord]]:
    """Fetch split events for ``symbol`` dated on or after ``start``."""
    url = SPLIT_CALENDAR_URL.format(base=config.FMP_BASE_URL, symbol=symbol)
    splits = parse_splits(_get_json(url, {"from": start}, api_key), symbol)
    logger.debug("%s: %s split records", symbol, "no" if splits is None else len(splits))
    return splits
