"""
Terminal output adapter.

Renders documents as aligned tables and errors with ANSI colors.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

from csvdecode.cli.output.base import OutputAdapter, OutputFormat
from csvdecode.core.decoder import CsvErrors

if TYPE_CHECKING:
    from collections.abc import Sequence

    from csvdecode.core.decoder import Errors
    from csvdecode.core.parser import Document


# Check if Unicode is supported
def _supports_unicode() -> bool:
    """Check if terminal supports Unicode."""
    try:
        "✓".encode(sys.stdout.encoding or "utf-8")
        return True
    except (UnicodeEncodeError, LookupError):
        return False


ERROR_SYMBOL_UNICODE = "✖"
ERROR_SYMBOL_ASCII = "X"
SUCCESS_SYMBOL_UNICODE = "✓"
SUCCESS_SYMBOL_ASCII = "OK"

# Cells wider than this are truncated in table output
MAX_CELL_WIDTH = 40


class TerminalOutput(OutputAdapter):
    """Terminal output with ANSI colors."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()
        self._use_unicode = _supports_unicode()
        self._error_symbol = ERROR_SYMBOL_UNICODE if self._use_unicode else ERROR_SYMBOL_ASCII
        self._success_symbol = SUCCESS_SYMBOL_UNICODE if self._use_unicode else SUCCESS_SYMBOL_ASCII

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_document(self, document: Document) -> str:
        """Render document as a table."""
        lines = self._table(document.headers, document.records)
        lines.append("")
        lines.append(
            self._style(
                f"{self._success_symbol} {document.row_count} record(s), "
                f"{document.width} column(s)",
                "green",
            )
        )
        return "\n".join(lines)

    def render_records(self, records: list[Any]) -> str:
        """Render decoded records one per line."""
        lines = [repr(r) for r in records]
        lines.append("")
        lines.append(self._style(f"{self._success_symbol} Decoded {len(records)} record(s).", "green"))
        return "\n".join(lines)

    def render_errors(self, errors: Errors) -> str:
        """Render grammar or decode errors."""
        symbol = self._style(self._error_symbol, "red")
        lines: list[str] = []

        if isinstance(errors, CsvErrors):
            for error in errors.errors:
                code = self._style(error.code, "dim")
                lines.append(f"  {symbol} {error.location}: {error.message} [{code}]")
            summary = f"{len(errors.errors)} parse error(s)"
        else:
            for record_error in errors.errors:
                where = self._style(f"record {record_error.index}", "bold")
                lines.append(f"  {symbol} {where}: {record_error.message}")
            summary = f"{len(errors.errors)} record(s) failed to decode"

        lines.append("")
        lines.append(f"Found: {self._style(summary, 'red')}")
        return "\n".join(lines)

    def _table(self, headers: Sequence[str], records: Sequence[Sequence[str]]) -> list[str]:
        """Align rows into columns; ragged rows are padded with blanks."""
        rows = [list(headers), *(list(r) for r in records)]
        column_count = max(len(r) for r in rows)
        cells = [
            [self._cell(r[i]) if i < len(r) else "" for i in range(column_count)] for r in rows
        ]
        widths = [max(len(row[i]) for row in cells) for i in range(column_count)]

        def fmt(row: list[str]) -> str:
            return " | ".join(value.ljust(width) for value, width in zip(row, widths)).rstrip()

        lines = [self._style(fmt(cells[0]), "bold")]
        lines.append("-+-".join("-" * w for w in widths))
        lines.extend(fmt(row) for row in cells[1:])
        return lines

    def _cell(self, value: str) -> str:
        text = value.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
        if len(text) > MAX_CELL_WIDTH:
            return text[: MAX_CELL_WIDTH - 3] + "..."
        return text

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        # ANSI color codes
        codes = {
            "bold": "\033[1m",
            "dim": "\033[2m",
            "red": "\033[31m",
            "green": "\033[32m",
        }
        reset = "\033[0m"

        code = codes.get(style, "")
        if code:
            return f"{code}{text}{reset}"
        return text
