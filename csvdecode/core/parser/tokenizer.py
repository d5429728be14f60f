"""
CSV tokenizer.

Grammar (SEP is the configured separator):

    document   := record LINESEP (record LINESEP)*
    record     := field (SEP field)*
    field      := escaped | nonescaped
    nonescaped := any characters except '"', SEP, CR, LF
    escaped    := '"' (any character except '"' | '""')* '"'
    LINESEP    := CRLF | CR | LF

Input that does not end with a line break gets one appended first, so
every record, including the last, is terminated the same way. There is
no whitespace skipping: padding around a quoted field is an error.

The scanner is a single forward pass over an explicit cursor. It never
backtracks further than one character.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import LINE_BREAK_CHARS, QUOTE_CHAR, Dialect

if TYPE_CHECKING:
    from collections.abc import Iterator


class TokenizerError(Exception):
    """Grammar violation at a position in the input."""

    def __init__(self, code: str, message: str, offset: int, line: int, column: int) -> None:
        self.code = code
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        super().__init__(f"Line {line}, column {column}: {message}")


def ensure_terminated(text: str) -> str:
    """Append a line break unless ``text`` already ends with one."""
    if text and text[-1] in LINE_BREAK_CHARS:
        return text
    return text + "\n"


def count_line_breaks(text: str) -> int:
    """Count line breaks, treating CRLF as a single break."""
    return text.count("\r") + text.count("\n") - text.count("\r\n")


def line_and_column(text: str, offset: int) -> tuple[int, int]:
    """Return the 1-indexed (line, column) of ``offset`` in ``text``."""
    prefix = text[:offset]
    line = 1 + count_line_breaks(prefix)
    last_break = max(prefix.rfind("\r"), prefix.rfind("\n"))
    return line, offset - last_break


class _Scanner:
    """Cursor over the terminated input text."""

    def __init__(self, text: str, separator: str) -> None:
        self.text = text
        self.length = len(text)
        self.separator = separator
        self.pos = 0
        self.line = 1

    def at_end(self) -> bool:
        return self.pos >= self.length

    def record(self) -> list[str]:
        fields = [self.field()]
        while self.pos < self.length and self.text[self.pos] == self.separator:
            self.pos += 1
            fields.append(self.field())
        return fields

    def field(self) -> str:
        if self.pos < self.length and self.text[self.pos] == QUOTE_CHAR:
            return self.escaped()
        return self.nonescaped()

    def nonescaped(self) -> str:
        text = self.text
        stop = (QUOTE_CHAR, self.separator, *LINE_BREAK_CHARS)
        start = pos = self.pos
        while pos < self.length and text[pos] not in stop:
            pos += 1
        self.pos = pos
        return text[start:pos]

    def escaped(self) -> str:
        text = self.text
        opened_at = self.pos
        self.pos += 1
        chunks: list[str] = []

        while True:
            close = text.find(QUOTE_CHAR, self.pos)
            if close == -1:
                raise self._error(
                    "CSV-QUOTE-001",
                    "quoted field is never closed",
                    opened_at,
                )
            chunks.append(text[self.pos : close])
            if close + 1 < self.length and text[close + 1] == QUOTE_CHAR:
                # Doubled quote
                chunks.append(QUOTE_CHAR)
                self.pos = close + 2
                continue
            self.pos = close + 1
            break

        self.line += count_line_breaks(text[opened_at : self.pos])
        return "".join(chunks)

    def line_break(self) -> None:
        """Consume CRLF, CR or LF, longest match first."""
        if self.at_end():
            return

        text = self.text
        char = text[self.pos]
        if text.startswith("\r\n", self.pos):
            self.pos += 2
        elif char in LINE_BREAK_CHARS:
            self.pos += 1
        elif char == QUOTE_CHAR:
            raise self._error(
                "CSV-QUOTE-003",
                "unexpected quote character in unquoted field",
                self.pos,
            )
        else:
            raise self._error(
                "CSV-QUOTE-002",
                f"expected {self.separator!r} or line break after closing quote, found {char!r}",
                self.pos,
            )
        self.line += 1

    def _error(self, code: str, message: str, offset: int) -> TokenizerError:
        line, column = line_and_column(self.text, offset)
        return TokenizerError(code, message, offset, line, column)


def tokenize(
    text: str,
    dialect: Dialect | None = None,
) -> Iterator[tuple[list[str], int, int]]:
    """
    Tokenize text into records.

    The first yielded record is the header row. Records are produced
    lazily; a grammar error raises ``TokenizerError`` at the record
    where it occurs.

    Args:
        text: The full input text
        dialect: CSV dialect (defaults to comma-separated)

    Yields:
        Tuples of (fields, start_line, end_line), 1-indexed line numbers
    """
    if dialect is None:
        dialect = Dialect()

    scanner = _Scanner(ensure_terminated(text), dialect.separator)

    while True:
        start_line = scanner.line
        fields = scanner.record()
        end_line = scanner.line
        scanner.line_break()
        yield fields, start_line, end_line
        if scanner.at_end():
            break
