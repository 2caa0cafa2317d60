"""Runtime configuration for dividend_history.

Values come from the environment (a local ``.env`` file is honoured) and fall
back to the defaults below.
"""

import os

from dotenv import load_dotenv

from .errors import ProviderUnavailableError

load_dotenv()

FMP_BASE_URL = os.getenv("FMP_BASE_URL", "https://financialmodelingprep.com/api/v3")
FMP_TIMEOUT = float(os.getenv("FMP_TIMEOUT", "15"))
SPLIT_CALENDAR_START = os.getenv("SPLIT_CALENDAR_START", "2019-01-01")
DEFAULT_LANGUAGE = os.getenv("DIVIDEND_HISTORY_LANG", "zh")

WINDOW_YEARS = 5
GROWTH_HORIZONS = (3, 5, 10)


def get_api_key() -> str:
    """Return the FMP access key or raise if it is not configured."""
    api_key = os.getenv("FMP_API_KEY", "")
    if not api_key:
        raise ProviderUnavailableError(
            "FMP API key required. Set FMP_API_KEY in the environment or a .env file."
        )
    return api_key
