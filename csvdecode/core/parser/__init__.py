"""
CSV Parser Core.

Public API for parsing CSV text into a Document.

Usage:
    from csvdecode.core.parser import parse

    result = parse("name,age\\nada,36\\n")
    document = result.unwrap()
    print(document.headers)   # ('name', 'age')
    print(document.records)   # (('ada', '36'),)

API Functions:
    parse(text) -> Result[Document, list[ParserError]]
    parse_with(separator, text) -> Result[Document, list[ParserError]]
    parse_text(text, dialect) -> Result[Document, list[ParserError]]
    parse_bytes(data, ...) -> Result[Document, list[ParserError]]
    parse_file(path, ...) -> Result[Document, list[ParserError]]
    tokenize(text, dialect) -> Iterator[(fields, start_line, end_line)]
"""

from __future__ import annotations

import logging
from pathlib import Path

from csvdecode.core.result import Err, Ok, Result

from .errors import Location, ParserError, get_error_description
from .models import DEFAULT_SEPARATOR, Dialect, Document
from .tokenizer import TokenizerError, ensure_terminated, line_and_column, tokenize

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8-sig"

ParseResult = Result[Document, list[ParserError]]


def parse(text: str) -> ParseResult:
    """
    Parse comma-separated text.

    Args:
        text: Complete CSV input

    Returns:
        Ok(Document) or Err(list of ParserError)
    """
    return parse_text(text, Dialect())


def parse_with(separator: str, text: str) -> ParseResult:
    """
    Parse text using a custom single-character field separator.

    Raises:
        pydantic.ValidationError: If ``separator`` is not a valid separator
    """
    return parse_text(text, Dialect(separator=separator))


def parse_text(text: str, dialect: Dialect, *, filename: str | None = None) -> ParseResult:
    """
    Parse text with an explicit dialect.

    Parsing is all-or-nothing: on the first grammar violation no partial
    Document is returned.
    """
    rows: list[tuple[str, ...]] = []
    try:
        for fields, _, _ in tokenize(text, dialect):
            rows.append(tuple(fields))
    except TokenizerError as e:
        error = ParserError.at(
            e.code,
            e.message,
            location=Location(file=filename, line=e.line, column=e.column, offset=e.offset),
            context={"found": _char_at(ensure_terminated(text), e.offset)},
        )
        logger.debug("Parse failed: %s", error)
        return Err([error])

    headers, *records = rows
    logger.debug(
        "Parsed %d header field(s) and %d record(s) with separator %r",
        len(headers),
        len(records),
        dialect.separator,
    )
    return Ok(Document(headers=headers, records=tuple(records)))


def parse_bytes(
    data: bytes,
    filename: str = "<bytes>",
    *,
    separator: str = DEFAULT_SEPARATOR,
    encoding: str = DEFAULT_ENCODING,
    max_bytes: int | None = None,
) -> ParseResult:
    """
    Parse CSV data from bytes.

    The encoding is fixed by the caller; a leading UTF-8 BOM is dropped
    with the default ``utf-8-sig``.

    Args:
        data: Raw content
        filename: Optional filename for error messages
        separator: Field separator
        encoding: Text encoding of ``data``
        max_bytes: Maximum accepted size (None = unlimited)

    Returns:
        Ok(Document) or Err(list of ParserError)
    """
    dialect = Dialect(separator=separator)

    if max_bytes is not None and max_bytes > 0 and len(data) > max_bytes:
        return Err(
            [
                ParserError.at(
                    "CSV-IO-001",
                    f"Input exceeds maximum size of {max_bytes} bytes",
                    location=Location(file=filename),
                    context={"max_bytes": max_bytes, "size": len(data)},
                )
            ]
        )

    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as e:
        return Err(
            [
                ParserError.at(
                    "CSV-ENC-001",
                    f"Cannot decode input as {encoding}: {e.reason}",
                    location=Location(file=filename, offset=e.start),
                    context={"encoding": encoding, "byte_offset": e.start},
                )
            ]
        )

    return parse_text(text, dialect, filename=filename)


def parse_file(
    path: Path | str,
    *,
    separator: str = DEFAULT_SEPARATOR,
    encoding: str = DEFAULT_ENCODING,
    max_bytes: int | None = None,
) -> ParseResult:
    """
    Parse a CSV file.

    Raises:
        FileNotFoundError: If file does not exist
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if max_bytes is not None and max_bytes > 0:
        with path.open("rb") as f:
            data = f.read(max_bytes + 1)
    else:
        data = path.read_bytes()

    return parse_bytes(
        data,
        str(path),
        separator=separator,
        encoding=encoding,
        max_bytes=max_bytes,
    )


def _char_at(text: str, offset: int) -> str | None:
    return text[offset] if offset < len(text) else None


# =============================================================================
# Public API Exports
# =============================================================================

__all__ = [
    "DEFAULT_SEPARATOR",
    # Models
    "Dialect",
    "Document",
    "Location",
    "ParseResult",
    "ParserError",
    "TokenizerError",
    "get_error_description",
    "line_and_column",
    # Main functions
    "parse",
    "parse_bytes",
    "parse_file",
    "parse_text",
    "parse_with",
    "tokenize",
]
