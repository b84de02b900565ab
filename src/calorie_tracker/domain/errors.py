"""Errors raised for malformed stats input."""


class InvalidDailyTotalError(ValueError):
    """Raised when the daily log history does not have the expected shape."""


class InvalidTargetError(ValueError):
    """Raised when the target is not a number."""
