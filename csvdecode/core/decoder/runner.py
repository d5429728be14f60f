"""
Batch decoding of parsed documents.

Every record is attempted. The batch succeeds only when every record
decodes; otherwise all failures are reported together, ordered by
record index, and the successfully decoded values are dropped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from csvdecode.core.result import Err, Ok, Result

from .errors import CsvErrors, DecodeErrors, Errors, RecordError

if TYPE_CHECKING:
    from csvdecode.core.parser import ParseResult
    from csvdecode.core.parser.models import Document

    from .combinators import Decoder

logger = logging.getLogger(__name__)


def decode(
    decoder: Decoder,
    parse_result: ParseResult,
    *,
    strict_width: bool = False,
) -> Result[list[Any], Errors]:
    """
    Decode the output of ``parse``.

    Grammar failures are forwarded as ``CsvErrors``.
    """
    match parse_result:
        case Err(error=errors):
            return Err(CsvErrors(errors=errors))
        case Ok(value=document):
            return decode_csv(decoder, document, strict_width=strict_width)
    raise TypeError(f"expected Ok or Err, got {parse_result!r}")


def decode_csv(
    decoder: Decoder,
    document: Document,
    *,
    strict_width: bool = False,
) -> Result[list[Any], Errors]:
    """
    Decode every data record of ``document``.

    Args:
        decoder: Decoder applied to each record from a fresh State
        document: Parsed document; the header row names the fields
        strict_width: Fail records whose width differs from the header row

    Returns:
        Ok(list of values) or Err(DecodeErrors)
    """
    headers = document.headers
    values: list[Any] = []
    errors: list[RecordError] = []

    for index, record in enumerate(document.records):
        if strict_width and len(record) != len(headers):
            errors.append(
                RecordError(
                    index=index,
                    message=f"expected {len(headers)} fields, found {len(record)}",
                )
            )
            continue

        match decoder.decode_record(headers, record):
            case Ok(value=value):
                values.append(value)
            case Err(error=message):
                errors.append(RecordError(index=index, message=message))

    if errors:
        logger.debug("%d of %d record(s) failed to decode", len(errors), len(document.records))
        return Err(DecodeErrors(errors=errors))

    logger.debug("Decoded %d record(s)", len(values))
    return Ok(values)
