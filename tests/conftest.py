"""Shared pytest fixtures for timetype tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """File-backed SQLite engine in a temp directory."""
    engine = create_engine(f"sqlite:///{tmp_path / 'timetype.db'}", echo=False)
    try:
        yield engine
    finally:
        engine.dispose()
