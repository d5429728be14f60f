"""
JSON output adapter.

Renders documents, records and errors as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

from csvdecode.cli.output.base import OutputAdapter, OutputFormat
from csvdecode.core.decoder import CsvErrors

if TYPE_CHECKING:
    from csvdecode.core.decoder import Errors
    from csvdecode.core.parser import Document, ParserError


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_document(self, document: Document) -> str:
        """Render document as JSON."""
        output = {
            "headers": list(document.headers),
            "records": [list(r) for r in document.records],
            "summary": {
                "width": document.width,
                "row_count": document.row_count,
            },
        }
        return json.dumps(output, indent=self.indent, ensure_ascii=False)

    def render_records(self, records: list[Any]) -> str:
        """Render decoded records as JSON. Non-JSON values are stringified."""
        output = {
            "records": records,
            "summary": {"row_count": len(records)},
        }
        return json.dumps(output, indent=self.indent, default=str, ensure_ascii=False)

    def render_errors(self, errors: Errors) -> str:
        """Render errors as JSON."""
        if isinstance(errors, CsvErrors):
            items = [self._parser_error_to_dict(e) for e in errors.errors]
        else:
            items = [{"index": e.index, "message": e.message} for e in errors.errors]

        output = {
            "kind": errors.kind,
            "errors": items,
            "summary": {"error_count": len(items)},
        }
        return json.dumps(output, indent=self.indent, default=str, ensure_ascii=False)

    def _parser_error_to_dict(self, error: ParserError) -> dict[str, Any]:
        """Convert parser error to dictionary."""
        return {
            "code": error.code,
            "title": error.title,
            "message": error.message,
            "location": {
                "file": error.location.file,
                "line": error.location.line,
                "column": error.location.column,
                "offset": error.location.offset,
            },
            "context": error.context,
        }
