"""
Record Decoder.

Turns a parsed Document into typed values using composable decoders.

Usage:
    from csvdecode.core.decoder import decode, field, integer, map_into, string
    from csvdecode.core.parser import parse

    decoder = map_into(Person, field("name", string) >> field("age", integer))
    people = decode(decoder, parse(text)).unwrap()
"""

from __future__ import annotations

from .combinators import (
    NO_DECODERS_SUCCEEDED,
    NOT_CALLABLE,
    PAST_END_OF_RECORD,
    Decoder,
    and_then,
    assert_field,
    assert_next,
    curry,
    fail,
    field,
    ignore_field,
    ignore_next,
    map_into,
    maybe,
    next_field,
    one_of,
    sequence,
    succeed,
)
from .converters import boolean, decimal, floating, integer, iso_date, string, strip
from .errors import CsvErrors, DecodeErrors, Errors, RecordError
from .runner import decode, decode_csv
from .state import State

__all__ = [
    "NO_DECODERS_SUCCEEDED",
    "NOT_CALLABLE",
    "PAST_END_OF_RECORD",
    "CsvErrors",
    "DecodeErrors",
    # Combinators
    "Decoder",
    "Errors",
    "RecordError",
    "State",
    "and_then",
    "assert_field",
    "assert_next",
    # Converters
    "boolean",
    "curry",
    "decimal",
    # Main functions
    "decode",
    "decode_csv",
    "fail",
    "field",
    "floating",
    "ignore_field",
    "ignore_next",
    "integer",
    "iso_date",
    "map_into",
    "maybe",
    "next_field",
    "one_of",
    "sequence",
    "string",
    "strip",
    "succeed",
]
