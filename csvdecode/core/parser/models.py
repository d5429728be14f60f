"""
Parser data models.

CRITICAL DESIGN DECISIONS:
- Fields are ALWAYS strings, never trimmed or converted by the parser
- Row width is NOT checked against the header width at parse time
- All models are frozen (immutable) for safety
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from collections.abc import Iterator

DEFAULT_SEPARATOR = ","
QUOTE_CHAR = '"'
LINE_BREAK_CHARS = ("\r", "\n")


def validate_separator(value: str) -> str:
    """Check that ``value`` can separate fields."""
    if len(value) != 1:
        raise ValueError(f"separator must be a single character, got {value!r}")
    if value == QUOTE_CHAR or value in LINE_BREAK_CHARS:
        raise ValueError(f"separator cannot be a quote or line break, got {value!r}")
    return value


class Dialect(BaseModel, frozen=True):
    """CSV dialect settings. Only the field separator is configurable."""

    separator: str = Field(
        default=DEFAULT_SEPARATOR,
        description="Single field separator character",
    )

    @field_validator("separator")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        return validate_separator(value)


class Document(BaseModel, frozen=True):
    """
    A parsed CSV document.

    The first record of the input becomes ``headers``; every following
    record is a data row in ``records``. Records may be wider or narrower
    than the header row.
    """

    headers: tuple[str, ...] = Field(description="Header row fields")
    records: tuple[tuple[str, ...], ...] = Field(
        default_factory=tuple,
        description="Data rows, header row excluded",
    )

    @property
    def row_count(self) -> int:
        """Number of data records."""
        return len(self.records)

    @property
    def width(self) -> int:
        """Number of header fields."""
        return len(self.headers)

    def iter_rows(self) -> Iterator[dict[str, str]]:
        """
        Iterate over records as header-keyed dicts.

        Pairs positionally and stops at the shorter of header and record.
        Duplicate header names keep their first value.
        """
        for record in self.records:
            row: dict[str, str] = {}
            for name, value in zip(self.headers, record):
                row.setdefault(name, value)
            yield row
