"""Tests for field converters."""

from datetime import date
from decimal import Decimal

import pytest

from csvdecode.core.decoder import boolean, decimal, floating, integer, iso_date, maybe, string, strip
from csvdecode.core.result import Err, Ok


class TestString:
    """Tests for string converter."""

    @pytest.mark.parametrize("raw", ["", " padded ", "x,y"])
    def test_accepts_anything(self, raw: str) -> None:
        assert string(raw) == Ok(raw)


class TestInteger:
    """Tests for integer converter."""

    @pytest.mark.parametrize(("raw", "expected"), [("0", 0), ("42", 42), ("-7", -7), ("+3", 3)])
    def test_valid(self, raw: str, expected: int) -> None:
        assert integer(raw) == Ok(expected)

    @pytest.mark.parametrize("raw", ["", " 1", "1 ", "1.5", "1_000", "abc", "١"])
    def test_invalid(self, raw: str) -> None:
        result = integer(raw)
        assert isinstance(result, Err)
        assert "integer" in result.error


class TestFloating:
    """Tests for floating converter."""

    def test_valid(self) -> None:
        assert floating("1.5") == Ok(1.5)
        assert floating("-2e3") == Ok(-2000.0)

    @pytest.mark.parametrize("raw", ["", " 1.5", "1,5", "x"])
    def test_invalid(self, raw: str) -> None:
        assert isinstance(floating(raw), Err)


class TestDecimal:
    """Tests for decimal converter."""

    def test_valid(self) -> None:
        assert decimal("10.25") == Ok(Decimal("10.25"))

    @pytest.mark.parametrize("raw", ["", "10,25", " 1", "ten"])
    def test_invalid(self, raw: str) -> None:
        assert isinstance(decimal(raw), Err)


class TestBoolean:
    """Tests for boolean converter."""

    @pytest.mark.parametrize("raw", ["true", "TRUE", "yes", "1"])
    def test_true(self, raw: str) -> None:
        assert boolean(raw) == Ok(True)

    @pytest.mark.parametrize("raw", ["false", "No", "0"])
    def test_false(self, raw: str) -> None:
        assert boolean(raw) == Ok(False)

    def test_invalid(self) -> None:
        assert boolean("maybe") == Err("could not convert 'maybe' to a boolean")


class TestIsoDate:
    """Tests for iso_date converter."""

    def test_valid(self) -> None:
        assert iso_date("2024-02-29") == Ok(date(2024, 2, 29))

    @pytest.mark.parametrize("raw", ["", "2023-02-29", "29.02.2024"])
    def test_invalid(self, raw: str) -> None:
        assert isinstance(iso_date(raw), Err)


class TestWrappers:
    """Tests for maybe and strip."""

    def test_maybe_empty_is_none(self) -> None:
        assert maybe(integer)("") == Ok(None)

    def test_maybe_present(self) -> None:
        assert maybe(integer)("5") == Ok(5)

    def test_maybe_propagates_error(self) -> None:
        assert isinstance(maybe(integer)("x"), Err)

    def test_maybe_whitespace_is_not_empty(self) -> None:
        """Test that only the exact empty string counts as absent."""
        assert isinstance(maybe(integer)(" "), Err)

    def test_strip(self) -> None:
        assert strip(integer)(" 12 ") == Ok(12)

    def test_strip_then_maybe(self) -> None:
        assert strip(maybe(integer))("   ") == Ok(None)
