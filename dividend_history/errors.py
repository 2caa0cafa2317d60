"""Exceptions raised while fetching and deriving dividend history."""

from .models import ErrorKind


class DividendHistoryError(Exception):
    """Base class for failures that end a fetch cycle."""

    kind = ErrorKind.UNKNOWN_FAILURE


class InvalidInputError(DividendHistoryError):
    """The symbol was empty or blank."""

    kind = ErrorKind.INVALID_INPUT


class ProviderUnavailableError(DividendHistoryError):
    """The provider could not be reached or answered with a non-success status."""

    kind = ErrorKind.PROVIDER_UNAVAILABLE


class NoDividendDataError(DividendHistoryError):
    kind = ErrorKind.NO_DIVIDEND_DATA


class NoRecentDividendDataError(DividendHistoryError):
    kind = ErrorKind.NO_RECENT_DIVIDEND_DATA
