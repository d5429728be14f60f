"""
Schema models.

A Schema describes the columns of a CSV layout and compiles into a
Decoder that yields one ``dict`` per record.
"""

from __future__ import annotations

from enum import Enum
from functools import reduce
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator

from csvdecode.core.decoder import combinators, converters
from csvdecode.core.parser.models import DEFAULT_SEPARATOR, Dialect, validate_separator

if TYPE_CHECKING:
    from collections.abc import Callable

    from csvdecode.core.decoder.combinators import Decoder
    from csvdecode.core.result import Result


class ColumnType(Enum):
    """Value type of a column."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"


class Lookup(Enum):
    """How columns are located in a record."""

    NAME = "name"  # by header name, any order
    POSITION = "position"  # left to right


CONVERTERS: dict[ColumnType, Callable[[str], Result[Any, str]]] = {
    ColumnType.STRING: converters.string,
    ColumnType.INTEGER: converters.integer,
    ColumnType.FLOAT: converters.floating,
    ColumnType.DECIMAL: converters.decimal,
    ColumnType.BOOLEAN: converters.boolean,
    ColumnType.DATE: converters.iso_date,
}


class ColumnSpec(BaseModel, frozen=True):
    """A single column of the layout."""

    name: str = Field(min_length=1, description="Header name, also the output key")
    type: ColumnType = Field(default=ColumnType.STRING)
    optional: bool = Field(default=False, description="Empty string decodes to None")
    strip: bool = Field(default=False, description="Trim whitespace before converting")

    def converter(self) -> Callable[[str], Result[Any, str]]:
        convert = CONVERTERS[self.type]
        if self.optional:
            convert = combinators.maybe(convert)
        if self.strip:
            convert = converters.strip(convert)
        return convert


class Schema(BaseModel, frozen=True):
    """Complete row layout loaded from YAML."""

    version: str = Field(default="1.0")
    separator: str = Field(default=DEFAULT_SEPARATOR)
    lookup: Lookup = Field(default=Lookup.NAME)
    columns: list[ColumnSpec] = Field(min_length=1)

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> str:
        return str(value)

    @field_validator("separator")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        return validate_separator(value)

    @property
    def dialect(self) -> Dialect:
        return Dialect(separator=self.separator)

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    def to_decoder(self) -> Decoder:
        """Compile into a decoder producing ``{column name: value}`` dicts."""
        names = self.column_names

        def build(*values: Any) -> dict[str, Any]:
            return dict(zip(names, values))

        steps = [self._column_decoder(column) for column in self.columns]
        chain = reduce(combinators.Decoder.then, steps)
        return combinators.map_into(combinators.curry(build, arity=len(names)), chain)

    def _column_decoder(self, column: ColumnSpec) -> Decoder:
        if self.lookup == Lookup.POSITION:
            return combinators.next_field(column.converter())
        return combinators.field(column.name, column.converter())
