"""
Exception hierarchy for csvdecode.

Malformed input never raises: the parser and decoder return ``Err`` values.
These exceptions are reserved for caller mistakes.
"""


class CsvDecodeError(Exception):
    """Base exception for all csvdecode errors."""


class UnwrapError(CsvDecodeError):
    """Raised when ``unwrap()`` is called on an ``Err``.

    The original error value is kept on ``error`` so callers can still
    render every diagnostic.
    """

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(str(error))


class SchemaError(CsvDecodeError):
    """Raised when a schema file is missing, unreadable, or invalid."""
