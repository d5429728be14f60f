"""
Pytest configuration and fixtures for csvdecode tests.

Provides fixtures for:
- Golden test files (CSV samples and schemas)
"""

from __future__ import annotations

from pathlib import Path

import pytest

# =============================================================================
# Path Fixtures
# =============================================================================

FIXTURES_DIR = Path(__file__).parent / "fixtures"
GOLDEN_DIR = FIXTURES_DIR / "golden"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture
def golden_dir() -> Path:
    """Return the golden files directory path."""
    return GOLDEN_DIR


# =============================================================================
# Golden File Fixtures
# =============================================================================


@pytest.fixture
def people_csv(golden_dir: Path) -> Path:
    """Comma-separated file with a header and two records."""
    return golden_dir / "people.csv"


@pytest.fixture
def people_semicolon_csv(golden_dir: Path) -> Path:
    """Semicolon-separated file with CRLF line endings."""
    return golden_dir / "people_semicolon.csv"


@pytest.fixture
def broken_quotes(golden_dir: Path) -> Path:
    """File with an unterminated quoted field."""
    return golden_dir / "broken_quotes.csv"


@pytest.fixture
def bad_rows(golden_dir: Path) -> Path:
    """File whose second record has a non-integer age."""
    return golden_dir / "bad_rows.csv"


@pytest.fixture
def embedded_newlines(golden_dir: Path) -> Path:
    """File with line breaks and doubled quotes inside a quoted field."""
    return golden_dir / "embedded_newlines.csv"


@pytest.fixture
def people_schema(golden_dir: Path) -> Path:
    """Schema for people.csv (name, integer age, optional email)."""
    return golden_dir / "people.yaml"


@pytest.fixture
def invalid_schema(golden_dir: Path) -> Path:
    """Schema with an unknown column type."""
    return golden_dir / "invalid_schema.yaml"

