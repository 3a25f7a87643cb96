"""Shared test fixtures and helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

HORMUUD = "0611234567"
SOMTEL = "0621234567"
TELESOM = "0631234567"
SOMLINK = "0641234567"


@pytest.fixture
def numbers_file(tmp_path: Path) -> Path:
    path = tmp_path / "numbers.txt"
    path.write_text(f"{HORMUUD}\ninvalid\n\n   \n{SOMTEL}\n", encoding="utf-8")
    return path


def nsn_with_prefix(prefix: str) -> str:
    return f"{prefix}1234567"
