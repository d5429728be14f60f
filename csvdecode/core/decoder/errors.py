"""
Decode error models.

Grammar failures and decode failures are kept apart:
- CsvErrors: the input could not be parsed at all
- DecodeErrors: one entry per record that failed to decode
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from csvdecode.core.parser.errors import ParserError


class RecordError(BaseModel, frozen=True):
    """Failure to decode a single record."""

    index: int = Field(ge=0, description="0-based position among data records")
    message: str

    def __str__(self) -> str:
        return f"record {self.index}: {self.message}"


class CsvErrors(BaseModel, frozen=True):
    """Grammar diagnostics forwarded from the parser."""

    kind: Literal["csv"] = "csv"
    errors: list[ParserError]

    def __str__(self) -> str:
        return "\n".join(str(e) for e in self.errors)


class DecodeErrors(BaseModel, frozen=True):
    """Per-record decode failures, ordered by record index."""

    kind: Literal["decode"] = "decode"
    errors: list[RecordError]

    @property
    def indices(self) -> list[int]:
        return [e.index for e in self.errors]

    def __str__(self) -> str:
        return "\n".join(str(e) for e in self.errors)


Errors = CsvErrors | DecodeErrors
