"""Tests for CLI output adapters."""

import io
import json
from datetime import date
from decimal import Decimal

import pytest

from csvdecode.cli.output import (
    JsonOutput,
    OutputFormat,
    TerminalOutput,
    get_output_adapter,
)
from csvdecode.core.decoder import CsvErrors, DecodeErrors, RecordError
from csvdecode.core.parser import Document, Location, ParserError


def make_document() -> Document:
    return Document(
        headers=("name", "note"),
        records=(("ada", "multi\nline"), ("bo",)),
    )


def make_parser_error() -> ParserError:
    return ParserError.at(
        "CSV-QUOTE-002",
        "expected ',' or line break after closing quote, found 'x'",
        location=Location(file="test.csv", line=2, column=9),
    )


class TestTerminalOutput:
    """Tests for TerminalOutput."""

    def test_render_document(self) -> None:
        output = TerminalOutput(color=False).render_document(make_document())
        lines = output.splitlines()
        assert lines[0].startswith("name")
        assert "multi\\nline" in output
        assert "2 record(s), 2 column(s)" in output

    def test_long_cells_truncated(self) -> None:
        document = Document(headers=("x",), records=(("y" * 100,),))
        output = TerminalOutput(color=False).render_document(document)
        assert "y" * 100 not in output
        assert "..." in output

    def test_render_records(self) -> None:
        output = TerminalOutput(color=False).render_records([{"a": 1}])
        assert "{'a': 1}" in output
        assert "Decoded 1 record(s)" in output

    def test_render_parse_errors(self) -> None:
        output = TerminalOutput(color=False).render_errors(CsvErrors(errors=[make_parser_error()]))
        assert "test.csv, line 2, column 9" in output
        assert "CSV-QUOTE-002" in output
        assert "1 parse error(s)" in output

    def test_render_decode_errors(self) -> None:
        errors = DecodeErrors(errors=[RecordError(index=3, message="past end of record")])
        output = TerminalOutput(color=False).render_errors(errors)
        assert "record 3: past end of record" in output
        assert "1 record(s) failed to decode" in output

    def test_no_color_for_non_tty(self) -> None:
        output = TerminalOutput(stream=io.StringIO(), color=True).render_document(make_document())
        assert "\033[" not in output


class TestJsonOutput:
    """Tests for JsonOutput."""

    def test_render_document(self) -> None:
        output = json.loads(JsonOutput().render_document(make_document()))
        assert output["headers"] == ["name", "note"]
        assert output["records"] == [["ada", "multi\nline"], ["bo"]]
        assert output["summary"] == {"width": 2, "row_count": 2}

    def test_render_records_stringifies(self) -> None:
        records = [{"when": date(2024, 1, 2), "amount": Decimal("1.50")}]
        output = json.loads(JsonOutput().render_records(records))
        assert output["records"] == [{"when": "2024-01-02", "amount": "1.50"}]

    def test_render_parse_errors(self) -> None:
        output = json.loads(JsonOutput().render_errors(CsvErrors(errors=[make_parser_error()])))
        assert output["kind"] == "csv"
        assert output["errors"][0]["location"]["line"] == 2
        assert output["summary"]["error_count"] == 1

    def test_render_decode_errors(self) -> None:
        errors = DecodeErrors(errors=[RecordError(index=0, message="bad")])
        output = json.loads(JsonOutput().render_errors(errors))
        assert output == {
            "kind": "decode",
            "errors": [{"index": 0, "message": "bad"}],
            "summary": {"error_count": 1},
        }

    def test_write_adds_newline(self) -> None:
        stream = io.StringIO()
        JsonOutput(stream=stream).write("{}")
        assert stream.getvalue() == "{}\n"


class TestGetOutputAdapter:
    """Tests for get_output_adapter."""

    def test_by_string(self) -> None:
        assert isinstance(get_output_adapter("json"), JsonOutput)
        assert isinstance(get_output_adapter("terminal"), TerminalOutput)

    def test_by_enum(self) -> None:
        assert get_output_adapter(OutputFormat.JSON).format == OutputFormat.JSON

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            get_output_adapter("xml")
