"""
csvdecode: CSV parsing and typed record decoding.

Parses CSV text into a Document of header and data rows, then decodes
the rows into application types with composable decoders.

Usage:
    from csvdecode import decode, field, integer, map_into, parse, string

    decoder = map_into(Person, field("name", string) >> field("age", integer))
    result = decode(decoder, parse("name,age\\nada,36\\n"))
"""

from csvdecode.core.decoder import (
    CsvErrors,
    DecodeErrors,
    Decoder,
    RecordError,
    and_then,
    assert_field,
    assert_next,
    boolean,
    curry,
    decimal,
    decode,
    decode_csv,
    fail,
    field,
    floating,
    ignore_field,
    ignore_next,
    integer,
    iso_date,
    map_into,
    maybe,
    next_field,
    one_of,
    sequence,
    string,
    strip,
    succeed,
)
from csvdecode.core.errors import CsvDecodeError, SchemaError, UnwrapError
from csvdecode.core.parser import Dialect, Document, ParserError, parse, parse_file, parse_with
from csvdecode.core.result import Err, Ok

__version__ = "0.1.0"
__all__ = [
    "CsvDecodeError",
    "CsvErrors",
    "DecodeErrors",
    "Decoder",
    "Dialect",
    "Document",
    "Err",
    "Ok",
    "ParserError",
    "RecordError",
    "SchemaError",
    "UnwrapError",
    "__version__",
    "and_then",
    "assert_field",
    "assert_next",
    "boolean",
    "curry",
    "decimal",
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
    "parse",
    "parse_file",
    "parse_with",
    "sequence",
    "string",
    "strip",
    "succeed",
]
