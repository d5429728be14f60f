"""
YAML row layouts compiled into decoders.

Usage:
    from csvdecode.core.schema import load_schema

    schema = load_schema("people.yaml")
    rows = decode(schema.to_decoder(), parse_with(schema.separator, text))
"""

from .loader import load_schema, schema_from_dict
from .models import ColumnSpec, ColumnType, Lookup, Schema

__all__ = [
    "ColumnSpec",
    "ColumnType",
    "Lookup",
    "Schema",
    "load_schema",
    "schema_from_dict",
]
