"""Tests for batch decoding."""

from __future__ import annotations

from dataclasses import dataclass

from csvdecode import (
    CsvErrors,
    DecodeErrors,
    RecordError,
    decode,
    decode_csv,
    field,
    integer,
    map_into,
    maybe,
    next_field,
    parse,
    parse_with,
    string,
)
from csvdecode.core.decoder import NOT_CALLABLE
from csvdecode.core.parser import Document
from csvdecode.core.result import Err, Ok


@dataclass(frozen=True)
class Person:
    name: str
    age: int


@dataclass(frozen=True)
class Contact:
    name: str
    email: str | None = None


PERSON = map_into(Person, field("name", string) >> field("age", integer))


class TestDecodeCsv:
    """Tests for decode_csv function."""

    def test_all_records_succeed(self) -> None:
        document = Document(headers=("name", "age"), records=(("ada", "36"), ("bo", "7")))
        assert decode_csv(PERSON, document) == Ok([Person("ada", 36), Person("bo", 7)])

    def test_header_row_not_decoded(self) -> None:
        document = Document(headers=("name", "age"), records=())
        assert decode_csv(PERSON, document) == Ok([])

    def test_single_failure_reports_index(self) -> None:
        """Test that one bad record yields exactly one indexed error."""
        document = Document(
            headers=("name", "age"),
            records=(("ada", "36"), ("bo", "old"), ("cy", "9")),
        )
        result = decode_csv(PERSON, document)
        assert result == Err(
            DecodeErrors(errors=[RecordError(index=1, message="could not convert 'old' to an integer")])
        )

    def test_failures_accumulate_in_order(self) -> None:
        """Test that every failing record is reported, ordered by index."""
        document = Document(
            headers=("name", "age"),
            records=(("a", "x"), ("b", "1"), ("c", "y"), ("d", "2"), ("e", "")),
        )
        result = decode_csv(PERSON, document)
        assert isinstance(result, Err)
        assert isinstance(result.error, DecodeErrors)
        assert result.error.indices == [0, 2, 4]

    def test_short_record_relaxed(self) -> None:
        """Test that a short record fails only when a missing field is needed."""
        document = Document(headers=("name", "age", "extra"), records=(("ada", "36"),))
        assert decode_csv(PERSON, document) == Ok([Person("ada", 36)])

    def test_short_record_missing_needed_field(self) -> None:
        document = Document(headers=("name", "age"), records=(("ada",),))
        result = decode_csv(PERSON, document)
        assert result == Err(DecodeErrors(errors=[RecordError(index=0, message="no field named 'age'")]))

    def test_long_record_extra_fields_dropped(self) -> None:
        document = Document(headers=("name", "age"), records=(("ada", "36", "surplus"),))
        assert decode_csv(PERSON, document) == Ok([Person("ada", 36)])

    def test_strict_width(self) -> None:
        document = Document(headers=("name", "age"), records=(("ada", "36", "x"), ("bo", "7")))
        result = decode_csv(PERSON, document, strict_width=True)
        assert result == Err(
            DecodeErrors(errors=[RecordError(index=0, message="expected 2 fields, found 3")])
        )

    def test_constructor_with_default_field(self) -> None:
        """Test that a defaulted constructor field is filled by its decoder."""
        decoder = map_into(Contact, field("name", string) >> field("email", maybe(string)))
        document = parse("name,email\nada,a@x\nbo,\n").unwrap()
        assert decode_csv(decoder, document) == Ok([Contact("ada", "a@x"), Contact("bo", None)])

    def test_misapplied_value_is_a_record_error(self) -> None:
        """Test that an over-long chain fails per record rather than raising."""
        decoder = map_into(Contact, next_field(string) >> next_field(string) >> next_field(string))
        document = Document(headers=("a", "b", "c"), records=(("1", "2", "3"),))
        assert decode_csv(decoder, document) == Err(
            DecodeErrors(errors=[RecordError(index=0, message=NOT_CALLABLE)])
        )

    def test_decoder_is_reusable(self) -> None:
        first = Document(headers=("name", "age"), records=(("a", "1"),))
        second = Document(headers=("age", "name"), records=(("2", "b"),))
        assert decode_csv(PERSON, first) == Ok([Person("a", 1)])
        assert decode_csv(PERSON, second) == Ok([Person("b", 2)])


class TestDecode:
    """Tests for decode function."""

    def test_forwards_grammar_errors(self) -> None:
        result = decode(PERSON, parse('name,age\n"ada\n'))
        assert isinstance(result, Err)
        assert isinstance(result.error, CsvErrors)
        assert result.error.kind == "csv"
        assert result.error.errors[0].code == "CSV-QUOTE-001"

    def test_decodes_parsed_document(self) -> None:
        result = decode(PERSON, parse("age,name\n36,ada\n"))
        assert result == Ok([Person("ada", 36)])

    def test_positional_with_tab_separator(self) -> None:
        decoder = map_into(Person, next_field(string) >> next_field(integer))
        result = decode(decoder, parse_with("\t", "n\ta\nada\t36\n"))
        assert result == Ok([Person("ada", 36)])

    def test_decode_errors_str(self) -> None:
        result = decode(PERSON, parse("name,age\na,1\nb,x\n"))
        assert isinstance(result, Err)
        assert str(result.error) == "record 1: could not convert 'x' to an integer"
