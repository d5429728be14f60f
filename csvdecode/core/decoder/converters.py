"""
Field converters.

A converter takes a raw field string and returns ``Ok(value)`` or
``Err(message)``. Converters never trim; wrap them in ``strip`` to
ignore surrounding whitespace.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from csvdecode.core.result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Callable

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

TRUE_VALUES = frozenset({"true", "yes", "1"})
FALSE_VALUES = frozenset({"false", "no", "0"})


def string(raw: str) -> Result[str, str]:
    """Accept the field as-is."""
    return Ok(raw)


def integer(raw: str) -> Result[int, str]:
    """Parse an optionally signed decimal integer."""
    if not INTEGER_PATTERN.fullmatch(raw):
        return Err(f"could not convert {raw!r} to an integer")
    return Ok(int(raw))


def floating(raw: str) -> Result[float, str]:
    """Parse a float (dot as decimal separator)."""
    if raw != raw.strip():
        return Err(f"could not convert {raw!r} to a float")
    try:
        return Ok(float(raw))
    except ValueError:
        return Err(f"could not convert {raw!r} to a float")


def decimal(raw: str) -> Result[Decimal, str]:
    """Parse an exact decimal value."""
    if not raw or raw != raw.strip():
        return Err(f"could not convert {raw!r} to a decimal")
    try:
        return Ok(Decimal(raw))
    except InvalidOperation:
        return Err(f"could not convert {raw!r} to a decimal")


def boolean(raw: str) -> Result[bool, str]:
    """Parse true/false, yes/no or 1/0, case-insensitively."""
    lowered = raw.lower()
    if lowered in TRUE_VALUES:
        return Ok(True)
    if lowered in FALSE_VALUES:
        return Ok(False)
    return Err(f"could not convert {raw!r} to a boolean")


def iso_date(raw: str) -> Result[date, str]:
    """Parse a YYYY-MM-DD date."""
    try:
        return Ok(date.fromisoformat(raw))
    except ValueError:
        return Err(f"could not convert {raw!r} to a date")


def strip(convert: Callable[[str], Result[Any, str]]) -> Callable[[str], Result[Any, str]]:
    """Trim surrounding whitespace before converting."""

    def converter(raw: str) -> Result[Any, str]:
        return convert(raw.strip())

    return converter
