"""Top level package for dividend_history.

The package downloads a ticker's dividend and stock-split history from
Financial Modeling Prep, keeps the last five years of dividends and derives a
chart series with padded axis bounds plus 3, 5 and 10 year growth rates. A
small click CLI renders the result in the terminal.
"""

__all__ = ["cli", "config", "errors", "fetch", "messages", "models", "pipeline", "utils"]
