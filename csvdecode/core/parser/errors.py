"""
Parser error models.

This module defines structured errors for the CSV grammar parser.
All parser errors use error codes from the CSV-XXX-NNN taxonomy.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Location(BaseModel, frozen=True):
    """Error location in the input text."""

    file: str | None = None
    line: int | None = None
    column: int | None = None
    offset: int | None = None

    def __str__(self) -> str:
        """Format location for display."""
        parts = []
        if self.file:
            parts.append(self.file)
        if self.line is not None:
            parts.append(f"line {self.line}")
        if self.column is not None:
            parts.append(f"column {self.column}")
        return ", ".join(parts) if parts else "<unknown>"


class ParserError(BaseModel, frozen=True):
    """
    Structured parser diagnostic.

    Error domains:
    - CSV-QUOTE-*: Quoted/unquoted field grammar errors
    - CSV-ENC-*: Byte decoding errors
    - CSV-IO-*: Input size errors
    """

    code: str = Field(
        pattern=r"^CSV-[A-Z]{2,5}-\d{3}$",
        description="Error code, e.g., 'CSV-QUOTE-001'",
    )
    title: str = Field(description="Short error title")
    message: str = Field(description="Detailed error message")
    location: Location = Field(
        default_factory=Location,
        description="Where the error occurred",
    )
    context: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional context (found, expected, etc.)",
    )

    @classmethod
    def at(
        cls,
        code: str,
        message: str,
        *,
        location: Location | None = None,
        context: dict[str, Any] | None = None,
    ) -> ParserError:
        """Create an error titled from the code registry."""
        return cls(
            code=code,
            title=PARSER_ERROR_CODES.get(code, "Parse error"),
            message=message,
            location=location or Location(),
            context=context or {},
        )

    def __str__(self) -> str:
        """Format error for display."""
        return f"[{self.code}] {self.location}: {self.message}"


# =============================================================================
# Error Codes Registry
# =============================================================================

PARSER_ERROR_CODES: dict[str, str] = {
    # Grammar errors
    "CSV-QUOTE-001": "Unterminated quoted field",
    "CSV-QUOTE-002": "Unexpected character after closing quote",
    "CSV-QUOTE-003": "Quote character inside unquoted field",
    # Encoding errors
    "CSV-ENC-001": "Invalid byte sequence for encoding",
    # Input errors
    "CSV-IO-001": "Input too large",
}


def get_error_description(code: str) -> str | None:
    """Get the description for an error code."""
    return PARSER_ERROR_CODES.get(code)
