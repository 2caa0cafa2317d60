"""Display strings for the two supported locales (``zh`` and ``en``)."""

import datetime as dt
from typing import Dict

from .models import ErrorKind

MESSAGES: Dict[str, Dict[str, str]] = {
    "zh": {
        "dividend_history": "股息历史",
        "dividend_growth": "股息成长率",
        "dividend_records": "股息发放记录",
        "stock_split_history": "股票分拆历史",
        "no_split_history": "无分拆记录",
        "split_ratio": "分拆比例",
        "adjusted_dividend": "调整后股息",
        "payment_date": "派息日",
        "date": "日期",
        "years": "年",
        "y_axis": "Y轴范围",
        "please_enter_symbol": "请输入股票代码",
        "no_data": "未找到该股票的股息数据",
        "no_recent_data": "最近5年没有股息数据",
        "error_fetch": "获取数据失败",
        "instructions": "使用说明",
        "examples": "可以尝试以下股票代码",
        "notes": "注意事项",
        "note1": "仅显示最近5年的股息记录",
        "note2": "股息金额已根据拆股进行调整",
        "note3": "数据来源于 Financial Modeling Prep",
    },
    "en": {
        "dividend_history": "Dividend History",
        "dividend_growth": "Dividend Growth Rate",
        "dividend_records": "Dividend Payment Records",
        "stock_split_history": "Stock Split History",
        "no_split_history": "No split history",
        "split_ratio": "Split Ratio",
        "adjusted_dividend": "Adjusted Dividend",
        "payment_date": "Payment Date",
        "date": "Date",
        "years": "Years",
        "y_axis": "Y-axis range",
        "please_enter_symbol": "Please enter a stock symbol",
        "no_data": "No dividend data found for this symbol",
        "no_recent_data": "No dividend data in the last 5 years",
        "error_fetch": "Failed to fetch data",
        "instructions": "Instructions",
        "examples": "Try one of these symbols",
        "notes": "Notes",
        "note1": "Only dividends from the last 5 years are shown",
        "note2": "Dividend amounts are adjusted for stock splits",
        "note3": "Data provided by Financial Modeling Prep",
    },
}

EXAMPLE_SYMBOLS = [
    ("AAPL", "Apple Inc."),
    ("MSFT", "Microsoft Corporation"),
    ("JNJ", "Johnson & Johnson"),
    ("KO", "The Coca-Cola Company"),
    ("PG", "Procter & Gamble Company"),
]

_ERROR_KEYS = {
    ErrorKind.INVALID_INPUT: "please_enter_symbol",
    ErrorKind.NO_DIVIDEND_DATA: "no_data",
    ErrorKind.NO_RECENT_DIVIDEND_DATA: "no_recent_data",
    ErrorKind.PROVIDER_UNAVAILABLE: "error_fetch",
    ErrorKind.UNKNOWN_FAILURE: "error_fetch",
}


def get_messages(lang: str) -> Dict[str, str]:
    return MESSAGES.get(lang, MESSAGES["zh"])


def error_message(kind: ErrorKind, lang: str, detail: str = "") -> str:
    """Localized text for ``kind``; fetch failures append the underlying detail."""
    text = get_messages(lang)[_ERROR_KEYS[kind]]
    if kind in (ErrorKind.PROVIDER_UNAVAILABLE, ErrorKind.UNKNOWN_FAILURE) and detail:
        return f"{text}: {detail}"
    return text


def format_chart_label(date: dt.date, lang: str) -> str:
    """Short locale date used on the chart axis (zh-CN ``2024/3/15``, en-US ``3/15/2024``)."""
    if lang == "en":
        return f"{date.month}/{date.day}/{date.year}"
    return f"{date.year}/{date.month}/{date.day}"


def format_table_date(date: dt.date) -> str:
    return date.strftime("%m/%d/%Y")
