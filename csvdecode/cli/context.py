"""
CLI context and configuration.

Exit codes, shared command options, and option resolution.
"""

from __future__ import annotations

import os
from enum import IntEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

from csvdecode.cli.output import OutputFormat, get_output_adapter
from csvdecode.core.decoder import DecodeErrors
from csvdecode.core.parser.models import DEFAULT_SEPARATOR, validate_separator
from csvdecode.core.result import Err

if TYPE_CHECKING:
    from csvdecode.cli.output import OutputAdapter
    from csvdecode.core.result import Result

# Default input size limit for CLI usage (can be overridden via flag/env).
DEFAULT_MAX_BYTES = 100 * 1024 * 1024  # 100 MiB
MAX_BYTES_ENV = "CSVDECODE_MAX_BYTES"

SEPARATOR_ALIASES = {
    "\\t": "\t",
    "tab": "\t",
    "space": " ",
}


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # Parsed/decoded cleanly
    ERROR = 1  # Some records failed to decode
    FATAL = 2  # Input could not be parsed
    USAGE = 64  # Command line usage error
    CONFIG = 78  # Schema/configuration error


class CliContext(BaseModel, frozen=True):
    """Options shared by the parse and decode commands."""

    # Output settings
    format: OutputFormat = Field(default=OutputFormat.TERMINAL)
    color: bool = Field(default=True)

    # Input settings
    separator: str | None = Field(default=None)  # None: command default or schema
    max_bytes: int | None = Field(default=None)  # already resolved, None = unlimited
    strict_width: bool = Field(default=False)

    @field_validator("separator", mode="before")
    @classmethod
    def _check_separator(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return validate_separator(resolve_separator(value))

    def separator_or(self, fallback: str = DEFAULT_SEPARATOR) -> str:
        """Return the configured separator, or ``fallback`` when none was given."""
        return self.separator if self.separator is not None else fallback

    def output_adapter(self) -> OutputAdapter:
        return get_output_adapter(self.format, color=self.color)


def get_exit_code(result: Result) -> ExitCode:
    """Map a parse or decode result to an exit code."""
    if not isinstance(result, Err):
        return ExitCode.SUCCESS
    if isinstance(result.error, DecodeErrors):
        return ExitCode.ERROR
    return ExitCode.FATAL


def resolve_max_bytes(max_bytes: int | None) -> int | None:
    """
    Resolve the input size limit.

    Precedence: explicit flag, then CSVDECODE_MAX_BYTES, then 100 MiB.
    Zero or negative means unlimited.

    Raises:
        ValueError: If the environment variable is not an integer
    """
    if max_bytes is not None:
        return None if max_bytes <= 0 else max_bytes

    env_value = os.environ.get(MAX_BYTES_ENV)
    if env_value:
        try:
            parsed = int(env_value)
        except ValueError:
            raise ValueError(f"{MAX_BYTES_ENV} must be an integer") from None
        return None if parsed <= 0 else parsed

    return DEFAULT_MAX_BYTES


def resolve_separator(value: str) -> str:
    """Translate shell-friendly spellings such as ``\\t`` or ``tab``."""
    return SEPARATOR_ALIASES.get(value.lower() if len(value) > 1 else value, value)
