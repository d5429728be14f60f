"""
Schema loader.

Loads row layouts from YAML files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from csvdecode.core.errors import SchemaError

from .models import Schema

logger = logging.getLogger(__name__)


def load_schema(path: Path | str) -> Schema:
    """
    Load a schema from a YAML file.

    YAML format:
    ```yaml
    version: "1.0"
    separator: ";"
    lookup: name
    columns:
      - name: id
        type: integer
      - name: email
        optional: true
        strip: true
    ```

    Raises:
        SchemaError: If the file is missing, not YAML, or not a valid schema
    """
    path = Path(path)

    if not path.exists():
        raise SchemaError(f"Schema file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SchemaError(f"Invalid YAML in {path}: {e}") from e

    schema = schema_from_dict(data)
    logger.debug("Loaded schema %s with %d column(s)", path, len(schema.columns))
    return schema


def schema_from_dict(data: Any) -> Schema:
    """
    Build a schema from already-parsed data.

    Raises:
        SchemaError: If ``data`` is not a valid schema
    """
    if not isinstance(data, dict):
        raise SchemaError(f"Schema must be a mapping, got {type(data).__name__}")

    try:
        return Schema.model_validate(data)
    except ValidationError as e:
        raise SchemaError(f"Invalid schema: {e}") from e
